from django.apps import AppConfig

class PluginGenConfig(AppConfig):
  name = "plugingen"
  label = "plugingen"
  verbose_name = "Plugin Generator"
