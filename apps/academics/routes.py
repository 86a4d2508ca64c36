# apps/academics/routes.py

from django.urls import path


def student_record_urls(kind, viewset, name):
    """
    URL patterns for one per-student record collection:

        students/<student_pk>/<kind>/        list, create
        students/<student_pk>/<kind>/<pk>/   retrieve, update, partial_update, destroy
    """
    collection = viewset.as_view({'get': 'list', 'post': 'create'})
    detail = viewset.as_view({
        'get': 'retrieve',
        'put': 'update',
        'patch': 'partial_update',
        'delete': 'destroy',
    })
    return [
        path(f'students/<uuid:student_pk>/{kind}/', collection, name=f'{name}-list'),
        path(f'students/<uuid:student_pk>/{kind}/<uuid:pk>/', detail, name=f'{name}-detail'),
    ]
