from django.urls import include, path

urlpatterns = [
    path('', include('searchsystem.urls')),
]
