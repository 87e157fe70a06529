# type: ignore
"""Point the service at a throwaway in-memory database before anything imports it."""
import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["NOTIFICATION_SERVICE_URL"] = ""
os.environ["CALENDAR_LOCALE"] = "pt-BR"
os.environ["LOG_LEVEL"] = "WARNING"
