# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "ECHON_APP_NAME": "Name used in the greeting and response header (default: Echon).",
    "ECHON_LOG_LEVEL": "Console logging level (default: WARNING). The log file always gets DEBUG.",
    # Console
    "ECHON_PROMPT": "Input prompt (default: '>>> You: ').",
    "ECHON_SHOW_TIMESTAMPS": "Prefix responses with local time (true/false, default: true).",
    # Paths (gitignored)
    "ECHON_DATA_DIR": "Local data directory (default: .local/echon).",
    "ECHON_LOG_FILE": "Log file path (default: <data_dir>/echon.log).",
}
