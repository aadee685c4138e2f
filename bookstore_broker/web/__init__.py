"""Transport HTTP du broker (FastAPI) : API Open Service Broker et API des librairies."""
