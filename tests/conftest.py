import os

# headless Qt for the window tests
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
