from django.apps import AppConfig

class SocialConfig(AppConfig):
    """Django app config for the FoodMedia social app."""
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'social'
    verbose_name = 'FoodMedia'
