from doublesrota.storage.json_store import JsonStateStore, default_state_path

__all__ = ["JsonStateStore", "default_state_path"]
