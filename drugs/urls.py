from django.urls import path
from . import views

app_name = 'drugs'

urlpatterns = [
    path('drugs', views.drug_list, name='drug_list'),
    path('drugs/new', views.create_drug, name='create_drug'),
    path('drugs/<int:drug_id>/edit', views.update_drug, name='update_drug'),
    path('drugs/<int:drug_id>/delete', views.delete_drug, name='delete_drug'),
]
