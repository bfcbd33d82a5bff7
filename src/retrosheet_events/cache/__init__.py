from retrosheet_events.cache.archive_cache import ArchiveCache, CacheEntry

__all__ = ["ArchiveCache", "CacheEntry"]
