import logging
import time
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from app.core import config
from ingestion.ingest import load_users
from models.user import User
from search.engine import search
from search.request import SearchRequest

class SearchService:
    def __init__(self, users: Optional[Sequence[User]] = None):
        self.users: Tuple[User, ...] = tuple(users) if users is not None else ()

    def load_data(self, data_path: Optional[Path] = None):
        data_path = data_path or config.dataset_path()
        logging.info("Loading users from %s", data_path)

        load_start = time.perf_counter()
        self.users = load_users(data_path)
        load_end = time.perf_counter()

        logging.info("Loaded %d users in %.3fs", len(self.users), load_end - load_start)

    def search(self, request: SearchRequest) -> List[User]:
        # the snapshot is never mutated after load, so no locking is needed
        return search(self.users, request)

    def health_check(self):
        return {
            "total_users": len(self.users),
            "status": "ok"
        }
