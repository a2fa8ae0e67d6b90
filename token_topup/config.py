"""Configuration module for the token top-up processor."""
import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Application settings
DEBUG = os.environ.get("DEBUG", "False").lower() in ["true", "1", "yes"]

# Input files (read from the working directory)
COMPANIES_FILE = os.environ.get("COMPANIES_FILE", "companies.json")
USERS_FILE = os.environ.get("USERS_FILE", "users.json")

# Output files. WARNING: these are overwritten on every run
OUTPUT_FILE = os.environ.get("OUTPUT_FILE", "output.txt")
INVALID_COMPANIES_FILE = os.environ.get("INVALID_COMPANIES_FILE", "invalid_companies.json")
INVALID_USERS_FILE = os.environ.get("INVALID_USERS_FILE", "invalid_users.json")

# Append-only log of every validation defect, kept across runs
VERIFICATION_LOG_FILE = os.environ.get("VERIFICATION_LOG_FILE", "verification_log.txt")
VERIFICATION_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

# Application logs
LOGS_FOLDER = os.environ.get("LOGS_FOLDER", "logs")

# Email configuration (top-up emails are not delivered)
EMAIL_SENDER = os.environ.get("EMAIL_SENDER", "noreply@example.com")
