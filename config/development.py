import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# JSON document holding the employee collection, relative to the working directory.
DATA_FILE = os.getenv("DATA_FILE", "employees.json")

HOST = os.getenv("HOST", "127.0.0.1")
PORT = int(os.getenv("PORT", "3000"))

DEBUG = True

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
LOG_FILE = os.getenv("LOG_FILE") or None
