"""Dados embarcados do Atlas Settings (layer default em `defaults.yaml`)."""
