"""Content-addressed cache of prepared puzzle images."""

import hashlib
from collections import OrderedDict
from typing import Callable, Optional

import numpy as np


class ImageCache:
    """
    Keeps prepared (cropped and resized) images keyed by the SHA-1 of
    the source file bytes. Oldest entries are evicted past `limit`.
    """

    def __init__(self, limit: int = 10):
        if limit < 1:
            raise ValueError(f"Cache limit must be at least 1, got {limit}")
        self.limit = limit
        self._entries: 'OrderedDict[str, np.ndarray]' = OrderedDict()

    @staticmethod
    def key_for(data: bytes) -> str:
        return hashlib.sha1(data).hexdigest()

    def get(self, key: str) -> Optional[np.ndarray]:
        return self._entries.get(key)

    def put(self, key: str, image: np.ndarray) -> None:
        self._entries[key] = image
        self._evict()

    def get_or_create(self, data: bytes, factory: Callable[[bytes], np.ndarray]) -> np.ndarray:
        """
        Return the cached image for these bytes, building it on a miss.
        
        Args:
            data: Encoded image file contents
            factory: Called with data to produce the prepared image
        """
        key = self.key_for(data)
        cached = self.get(key)
        if cached is not None:
            return cached
        image = factory(data)
        self.put(key, image)
        return image

    def _evict(self):
        while len(self._entries) > self.limit:
            self._entries.popitem(last=False)

    def clear(self):
        self._entries.clear()

    def __contains__(self, key):
        return key in self._entries

    def __len__(self):
        return len(self._entries)
