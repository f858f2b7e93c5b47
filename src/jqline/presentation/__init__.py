"""Presentation layer: controller, widgets and the Textual app."""
