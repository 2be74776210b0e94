# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting without opening the source.
"""

ENV_VARS = {
    # App / logging
    "TASK_KEEPER_APP_NAME": "App display name (default: task_keeper).",
    "TASK_KEEPER_LOG_LEVEL": "Console logging level when bootstrap configures logging (default: INFO).",
    # Storage
    "TASK_KEEPER_DATA_DIR": "Local data directory (default: .local/task_keeper).",
    "TASK_KEEPER_STORE_BACKEND": "Key-value backend: sqlite | file | memory (default: sqlite).",
    "TASK_KEEPER_STORE_PATH": (
        "Backend location (default: <data_dir>/tasks.sqlite3 for sqlite, <data_dir>/kv for file)."
    ),
    "TASK_KEEPER_STORAGE_KEY": "Key the task list is stored under (default: FavoriteTasks).",
}
