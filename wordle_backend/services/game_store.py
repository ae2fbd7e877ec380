"""
Game Store

Persistence for game sessions. The game service only talks to the abstract
GameStore; concrete stores keep the data in memory or in MongoDB.

Every mutation is a compare-and-swap on the session's ``version`` so that
two requests racing on the same game cannot silently drop a guess.
"""

import copy
import logging
import threading
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Dict, List, Optional, Sequence

from pymongo import ASCENDING, ReturnDocument
from pymongo.errors import DuplicateKeyError, PyMongoError
from pymongo.mongo_client import MongoClient
from pymongo.server_api import ServerApi

from ..errors import ConflictError, NotFoundError, StoreError
from ..models.game import GameSession, GameStatus, GuessRecord

logger = logging.getLogger(__name__)

GAME_STATES = 'game_states'


class GameStore(ABC):
    """Persistence contract consumed by the game service."""

    @abstractmethod
    def next_identifier(self, kind: str = GAME_STATES) -> int:
        """Produce a fresh, monotonically increasing identifier for ``kind``."""

    @abstractmethod
    def insert(self, session: GameSession) -> None:
        """Persist a brand-new session."""

    @abstractmethod
    def find_by_identifier(self, game_id: int) -> GameSession:
        """Load a session or raise NotFoundError."""

    @abstractmethod
    def find_all(self) -> List[GameSession]:
        """Load every session ordered by identifier."""

    @abstractmethod
    def replace_guesses_and_status(self,
                                   game_id: int,
                                   appended_guesses: Sequence[GuessRecord],
                                   new_status: GameStatus,
                                   timestamp: datetime,
                                   expected_version: int) -> None:
        """
        Append guesses and overwrite status/timestamp in one atomic step.

        Raises:
            NotFoundError: If the session does not exist
            ConflictError: If the stored version differs from expected_version
        """

    @abstractmethod
    def set_status(self,
                   game_id: int,
                   new_status: GameStatus,
                   timestamp: datetime,
                   expected_version: int) -> None:
        """Overwrite status/timestamp with the same guarantees as replace_guesses_and_status."""


class InMemoryGameStore(GameStore):
    """
    Process-local store backed by a dict of documents.

    Documents are deep-copied on the way in and out so that callers never
    share mutable state with the store.
    """

    def __init__(self):
        self._documents: Dict[int, Dict] = {}
        self._counters: Dict[str, int] = {}
        self._lock = threading.Lock()

    def next_identifier(self, kind: str = GAME_STATES) -> int:
        with self._lock:
            self._counters[kind] = self._counters.get(kind, 0) + 1
            return self._counters[kind]

    def insert(self, session: GameSession) -> None:
        with self._lock:
            if session.id in self._documents:
                raise ConflictError(f"Game state {session.id} already exists")
            self._documents[session.id] = copy.deepcopy(session.to_document())

    def find_by_identifier(self, game_id: int) -> GameSession:
        with self._lock:
            document = self._documents.get(game_id)
            if document is None:
                raise NotFoundError(game_id)
            return GameSession.from_document(copy.deepcopy(document))

    def find_all(self) -> List[GameSession]:
        with self._lock:
            documents = [copy.deepcopy(self._documents[key]) for key in sorted(self._documents)]
        return [GameSession.from_document(document) for document in documents]

    def replace_guesses_and_status(self, game_id, appended_guesses, new_status, timestamp, expected_version):
        with self._lock:
            document = self._checked_document(game_id, expected_version)
            document['tries'].extend(guess.to_dict() for guess in appended_guesses)
            self._apply_status(document, new_status, timestamp)

    def set_status(self, game_id, new_status, timestamp, expected_version):
        with self._lock:
            document = self._checked_document(game_id, expected_version)
            self._apply_status(document, new_status, timestamp)

    def _checked_document(self, game_id: int, expected_version: int) -> Dict:
        document = self._documents.get(game_id)
        if document is None:
            raise NotFoundError(game_id)
        if document['version'] != expected_version:
            raise ConflictError(
                f"Game state {game_id} was modified concurrently "
                f"(expected version {expected_version}, found {document['version']})"
            )
        return document

    @staticmethod
    def _apply_status(document: Dict, new_status: GameStatus, timestamp: datetime) -> None:
        document['game_status'] = new_status.value
        document['updated_at'] = timestamp
        document['version'] += 1


class MongoGameStore(GameStore):
    """
    MongoDB-backed store.

    Sessions live in the ``game_states`` collection keyed by ``_id``;
    identifiers are drawn from a ``counters`` collection.
    """

    def __init__(self, mongo_uri: str = None, db_name: str = 'wordle_game', client: Optional[MongoClient] = None):
        """
        Initialize the store with a MongoDB connection.

        Args:
            mongo_uri: MongoDB connection string (ignored when client is given)
            db_name: Database name
            client: Pre-built client, mainly for tests
        """
        try:
            self.client = client or MongoClient(mongo_uri, server_api=ServerApi('1'), tz_aware=True)
            self.db = self.client[db_name]
            self.games_collection = self.db[GAME_STATES]
            self.counters_collection = self.db.counters

            if client is None:
                self.client.admin.command('ping')
                logger.info("Connected to MongoDB database '%s'", db_name)

            self.games_collection.create_index([('game_status', ASCENDING)])
        except PyMongoError as e:
            raise StoreError(f"Failed to connect to MongoDB: {e}") from e

    def next_identifier(self, kind: str = GAME_STATES) -> int:
        try:
            counter = self.counters_collection.find_one_and_update(
                {'_id': kind},
                {'$inc': {'seq': 1}},
                upsert=True,
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as e:
            raise StoreError(f"Failed to get next ID for {kind}: {e}") from e
        return int(counter['seq'])

    def insert(self, session: GameSession) -> None:
        try:
            self.games_collection.insert_one(session.to_document())
        except DuplicateKeyError as e:
            raise ConflictError(f"Game state {session.id} already exists") from e
        except PyMongoError as e:
            raise StoreError(f"Failed to save game state: {e}") from e

    def find_by_identifier(self, game_id: int) -> GameSession:
        try:
            document = self.games_collection.find_one({'_id': game_id})
        except PyMongoError as e:
            raise StoreError(f"Failed to load game state: {e}") from e
        if document is None:
            raise NotFoundError(game_id)
        return GameSession.from_document(document)

    def find_all(self) -> List[GameSession]:
        try:
            documents = list(self.games_collection.find().sort('_id', ASCENDING))
        except PyMongoError as e:
            raise StoreError(f"Failed to get all game states: {e}") from e
        return [GameSession.from_document(document) for document in documents]

    def replace_guesses_and_status(self, game_id, appended_guesses, new_status, timestamp, expected_version):
        self._update(game_id, expected_version, {
            '$push': {'tries': {'$each': [guess.to_dict() for guess in appended_guesses]}},
            '$set': {'game_status': new_status.value, 'updated_at': timestamp},
            '$inc': {'version': 1},
        })

    def set_status(self, game_id, new_status, timestamp, expected_version):
        self._update(game_id, expected_version, {
            '$set': {'game_status': new_status.value, 'updated_at': timestamp},
            '$inc': {'version': 1},
        })

    def _update(self, game_id: int, expected_version: int, update: Dict) -> None:
        try:
            result = self.games_collection.update_one({'_id': game_id, 'version': expected_version}, update)
            if result.matched_count == 1:
                return
            exists = self.games_collection.count_documents({'_id': game_id}, limit=1) > 0
        except PyMongoError as e:
            raise StoreError(f"Failed to update game state: {e}") from e

        if not exists:
            raise NotFoundError(game_id)
        raise ConflictError(f"Game state {game_id} was modified concurrently")


def create_store(config) -> GameStore:
    """
    Build the store selected by ``STORE_BACKEND``.

    Args:
        config: Config class or Flask config mapping
    """
    get = config.get if isinstance(config, dict) else lambda key, default=None: getattr(config, key, default)
    backend = (get('STORE_BACKEND', 'memory') or 'memory').lower()

    if backend == 'memory':
        return InMemoryGameStore()
    if backend == 'mongo':
        mongo_uri = get('MONGO_URI')
        if not mongo_uri:
            raise StoreError("MONGO_URI must be set when STORE_BACKEND is 'mongo'")
        return MongoGameStore(mongo_uri, get('MONGO_DB_NAME', 'wordle_game'))
    raise StoreError(f"Unknown STORE_BACKEND '{backend}'")
