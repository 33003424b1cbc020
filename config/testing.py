import os

SECRET_KEY = "test-secret"

DATA_FILE = os.getenv("DATA_FILE", "employees.test.json")

HOST = "127.0.0.1"
PORT = 3000

DEBUG = False
TESTING = True

LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")
LOG_FILE = None
