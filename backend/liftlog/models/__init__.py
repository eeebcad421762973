from liftlog.models.kv_entry import KVEntry

__all__ = ["KVEntry"]
