# backend/passenger_wsgi.py
import sys
import os
from pathlib import Path

# 🔹 Make sure the backend is importable
BASE_DIR = Path(__file__).resolve().parent
sys.path.insert(0, str(BASE_DIR))

# 🔹 Production environment for config.py
os.environ["ENV"] = "production"

# 🔹 Import the FastAPI app
from main import app as application  # cPanel expects "application"
