"""
URL configuration for the Taskboard API.
"""
from django.contrib import admin
from django.urls import path
from ninja import NinjaAPI

from apps.core.errors import register_exception_handlers

api = NinjaAPI(
    title="Taskboard API",
    version="1.0.0",
    description="Task management REST API",
    docs_url="/docs",
)
register_exception_handlers(api)

from apps.core.api import router as core_router
from apps.identity.api import router as identity_router
from apps.tasks.api import router as tasks_router

api.add_router("", core_router)
api.add_router("", identity_router)
api.add_router("", tasks_router)

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/', api.urls),
]
