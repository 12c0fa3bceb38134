from django.apps import AppConfig


class ContentRendererConfig(AppConfig):
    name = "content_renderer"
    verbose_name = "Content renderer"
