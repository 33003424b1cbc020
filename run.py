"""Start the payroll web server.

PORT (default 3000) and HOST come from the active settings module / environment.
"""
import sys

from payroll_system.main import serve

if __name__ == "__main__":
    sys.exit(serve())
