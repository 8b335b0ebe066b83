import os

# Keep telelog output off the test console.
os.environ.setdefault("TEXTFILE_ENGINE_DISABLE_CONSOLE", "1")
