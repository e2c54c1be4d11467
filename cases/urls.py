from django.urls import path
from . import views

app_name = 'cases'

urlpatterns = [
    # Core Case Management
    path('', views.case_list, name='case_list'),
    path('new/', views.case_create, name='case_create'),
    path('<uuid:case_id>/', views.case_detail, name='case_detail'),
    path('<uuid:case_id>/edit/', views.case_edit, name='case_edit'),
    path('<uuid:case_id>/delete/', views.case_delete, name='case_delete'),
    path('<uuid:case_id>/summary.pdf', views.case_summary_pdf, name='case_summary_pdf'),

    # Sub-features
    path('<uuid:case_id>/updates/add/', views.case_update_create, name='case_update_create'),
    path('<uuid:case_id>/assignments/add/', views.assignment_create, name='assignment_create'),
    path('<uuid:case_id>/assignments/<int:assignment_id>/remove/', views.assignment_delete, name='assignment_delete'),
]
