"""
Task subsystem.

Components:
- task_models.py: the Task record and its completion invariant
- task_codec.py: JSON encoding/decoding + EncodeError/DecodeError
- task_store.py: TaskStore (save/load/upsert over a key-value store)
"""
