"""Sample Qt application consuming the localization provider."""
