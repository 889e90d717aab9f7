# Entry point for buildozer/python-for-android, which expect main.py at the root
from thirtydays.app import run_app

run_app()
