"""
Data shapes for the Instapaper API.

Entity types describe the JSON objects the server returns. They are
annotations only: responses are handed back exactly as decoded.

Parameter classes describe what each endpoint accepts. They are checked
when constructed, so a bad call fails before anything is signed or sent.
"""

from dataclasses import dataclass, fields
from typing import (
    Any, Dict, Iterable, List, Literal, Mapping, NamedTuple, Optional, Sequence, Tuple, Type,
    TypedDict, TypeVar, Union
)

from .constants import BUILTIN_FOLDERS, MAX_LIST_LIMIT, MIN_LIST_LIMIT
from .exceptions import ParameterError


class Token(NamedTuple):
    """OAuth access token pair."""
    key: str
    secret: str

    @classmethod
    def coerce(cls, value: Any) -> Optional["Token"]:
        """
        Build a Token from the forms callers tend to keep tokens in.

        Accepts None, a Token, a (key, secret) pair, or a mapping with
        either key/secret or oauth_token/oauth_token_secret entries.
        """
        if value is None or isinstance(value, Token):
            return value
        if isinstance(value, Mapping):
            key = value.get('key', value.get('oauth_token'))
            secret = value.get('secret', value.get('oauth_token_secret'))
        else:
            try:
                key, secret = value
            except (TypeError, ValueError):
                raise ParameterError(f"Cannot build a token from {type(value).__name__}")
        if not key or not secret:
            raise ParameterError("Token key and secret must both be non-empty")
        return cls(str(key), str(secret))


# Entities

class Tag(TypedDict):
    id: int
    name: str


class User(TypedDict):
    type: Literal["user"]
    user_id: int
    username: str
    subscription_is_active: Literal["0", "1"]


class Bookmark(TypedDict):
    type: Literal["bookmark"]
    hash: str
    description: str
    tags: List[Tag]
    bookmark_id: int
    private_source: str
    title: str
    url: str
    progress_timestamp: int
    time: int
    progress: float
    starred: Literal["0", "1"]


class Folder(TypedDict):
    type: Literal["folder"]
    position: int
    folder_id: int
    title: str
    display_title: str
    slug: str
    sync_to_mobile: Literal[0, 1]
    public: Union[Literal[False], Literal[1]]


class Highlight(TypedDict):
    type: Literal["highlight"]
    highlight_id: int
    text: str
    note: Optional[str]
    bookmark_id: int
    time: int
    position: int


class Error(TypedDict):
    type: Literal["error"]
    error_code: int
    message: str


class Meta(TypedDict, total=False):
    type: Literal["meta"]


ListItem = Union[User, Bookmark, Folder, Error, Meta]


# Parameters

def _compact(values: Dict[str, Any]) -> Dict[str, Any]:
    return {key: value for key, value in values.items() if value is not None}


def _require(value: Any, name: str):
    if value is None or value == "":
        raise ParameterError(f"{name} is required")


@dataclass(frozen=True)
class ListParams:
    """Parameters for bookmarks/list."""
    limit: Optional[int] = None
    folder_id: Optional[Union[int, str]] = None
    have: Optional[str] = None
    highlights: Optional[str] = None

    def __post_init__(self):
        if self.limit is not None:
            if isinstance(self.limit, bool) or not isinstance(self.limit, int):
                raise ParameterError("limit must be an integer")
            if not MIN_LIST_LIMIT <= self.limit <= MAX_LIST_LIMIT:
                raise ParameterError(
                    f"limit must be between {MIN_LIST_LIMIT} and {MAX_LIST_LIMIT}, got {self.limit}"
                )
        if self.folder_id is not None:
            folder = str(self.folder_id)
            if folder not in BUILTIN_FOLDERS and not folder.isdigit():
                raise ParameterError(
                    f"folder_id must be a folder id or one of {', '.join(BUILTIN_FOLDERS)}"
                )

    def to_params(self) -> Dict[str, Any]:
        return _compact({
            'limit': self.limit,
            'folder_id': self.folder_id,
            'have': self.have,
            'highlights': self.highlights,
        })


@dataclass(frozen=True)
class UpdateReadProgressParams:
    """Parameters for bookmarks/update_read_progress."""
    bookmark_id: Union[int, str]
    progress: float
    progress_timestamp: int

    def __post_init__(self):
        _require(self.bookmark_id, 'bookmark_id')
        _require(self.progress, 'progress')
        _require(self.progress_timestamp, 'progress_timestamp')
        if not 0.0 <= float(self.progress) <= 1.0:
            raise ParameterError(f"progress must be between 0.0 and 1.0, got {self.progress}")
        if int(self.progress_timestamp) < 0:
            raise ParameterError("progress_timestamp must not be negative")

    def to_params(self) -> Dict[str, Any]:
        return {
            'bookmark_id': self.bookmark_id,
            'progress': self.progress,
            'progress_timestamp': self.progress_timestamp,
        }


@dataclass(frozen=True)
class AddBookmarkParams:
    """
    Parameters for bookmarks/add.

    A url is required unless the bookmark comes from a private source, in
    which case the content must be supplied instead.
    """
    url: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    folder_id: Optional[int] = None
    resolve_final_url: Optional[bool] = None
    archived: Optional[bool] = None
    tags: Optional[Sequence[Union[str, Mapping[str, str]]]] = None
    is_private_from_source: Optional[str] = None
    content: Optional[str] = None

    def __post_init__(self):
        if self.is_private_from_source:
            _require(self.content, 'content')
        else:
            _require(self.url, 'url')
        if self.tags is not None and isinstance(self.tags, (str, bytes)):
            raise ParameterError("tags must be a sequence of names, not a string")

    def _tag_objects(self) -> Optional[List[Dict[str, str]]]:
        if self.tags is None:
            return None
        tags = []
        for tag in self.tags:
            if isinstance(tag, Mapping):
                name = tag.get('name')
            else:
                name = tag
            _require(name, 'tag name')
            tags.append({'name': str(name)})
        return tags

    def to_params(self) -> Dict[str, Any]:
        return _compact({
            'url': self.url,
            'title': self.title,
            'description': self.description,
            'folder_id': self.folder_id,
            'resolve_final_url': self.resolve_final_url,
            'archived': self.archived,
            'tags': self._tag_objects(),
            'is_private_from_source': self.is_private_from_source,
            'content': self.content,
        })


@dataclass(frozen=True)
class AddHighlightParams:
    """Parameters for bookmarks/{bookmark_id}/highlight."""
    bookmark_id: Union[int, str]
    text: str
    position: Optional[int] = None

    def __post_init__(self):
        _require(self.bookmark_id, 'bookmark_id')
        _require(self.text, 'text')
        if self.position is not None and int(self.position) < 0:
            raise ParameterError("position must not be negative")

    def to_params(self) -> Dict[str, Any]:
        # bookmark_id travels in the URL path
        return _compact({'text': self.text, 'position': self.position})


P = TypeVar('P')


def coerce_params(cls: Type[P], params: Any, overrides: Mapping[str, Any]) -> P:
    """
    Resolve an endpoint's arguments into its parameter class.

    Callers may pass an instance, a plain mapping, or keyword arguments,
    but not a mix of an object and keywords.
    """
    if isinstance(params, cls):
        if overrides:
            raise ParameterError(f"Pass either a {cls.__name__} or keyword arguments, not both")
        return params
    if params is not None and not isinstance(params, Mapping):
        raise ParameterError(f"Expected {cls.__name__} or a mapping, got {type(params).__name__}")
    values = dict(params or {})
    values.update(overrides)
    known = {field.name for field in fields(cls)}
    unknown = sorted(set(values) - known)
    if unknown:
        raise ParameterError(f"Unknown parameter(s) for {cls.__name__}: {', '.join(unknown)}")
    try:
        return cls(**values)
    except TypeError as e:
        raise ParameterError(str(e)) from e


def format_folder_order(order: Union[str, Iterable[Tuple[Union[int, str], int]]]) -> str:
    """Render folders/set_order input as "folder_id:position,..."."""
    if isinstance(order, str):
        _require(order, 'order')
        return order
    pairs = [f"{folder_id}:{position}" for folder_id, position in order]
    if not pairs:
        raise ParameterError("order is required")
    return ",".join(pairs)
