"""
URL configuration for the task list API.
"""
from django.urls import path
from ninja import NinjaAPI

from apps.core.handlers import register_exception_handlers
from apps.core.parser import JSONObjectParser

api = NinjaAPI(
    title="Task List API",
    version="1.0.0",
    description="Per-user task list backed by a relational store",
    docs_url="/docs",
    parser=JSONObjectParser(),
)

register_exception_handlers(api)

from apps.tasks.api import router as tasks_router

api.add_router("/list", tasks_router)

urlpatterns = [
    path('', api.urls),
]
