"""Infrastructure layer: adapters over third-party query engines.

Kept free of imports so the jq worker process starts without loading the
rest of the application.
"""
