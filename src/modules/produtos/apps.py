from django.apps import AppConfig


class ProdutosConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "modules.produtos"
    label = "produtos"
    verbose_name = "Produtos"
