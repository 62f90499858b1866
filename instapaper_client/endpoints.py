"""
Resource endpoints for bookmarks, folders and highlights.

Each method maps to one API call: build the form parameters, send them
through the client's signed request() and return the decoded body.
"""

from typing import Any, Iterable, List, Mapping, Optional, Protocol, Tuple, Union

from .constants import (
    BOOKMARKS_ADD_PATH,
    BOOKMARKS_ARCHIVE_PATH,
    BOOKMARKS_DELETE_PATH,
    BOOKMARKS_GET_TEXT_PATH,
    BOOKMARKS_LIST_PATH,
    BOOKMARKS_MOVE_PATH,
    BOOKMARKS_STAR_PATH,
    BOOKMARKS_UNARCHIVE_PATH,
    BOOKMARKS_UNSTAR_PATH,
    BOOKMARKS_UPDATE_READ_PROGRESS_PATH,
    FOLDERS_ADD_PATH,
    FOLDERS_DELETE_PATH,
    FOLDERS_LIST_PATH,
    FOLDERS_SET_ORDER_PATH,
    HIGHLIGHTS_ADD_PATH,
    HIGHLIGHTS_DELETE_PATH,
    HIGHLIGHTS_LIST_PATH,
)
from .exceptions import ParameterError
from .models import (
    AddBookmarkParams,
    AddHighlightParams,
    Bookmark,
    Folder,
    Highlight,
    ListItem,
    ListParams,
    UpdateReadProgressParams,
    coerce_params,
    format_folder_order,
)

Id = Union[int, str]


class Requester(Protocol):
    def request(self, endpoint: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        ...


def _id(value: Id, name: str) -> Id:
    if value is None or value == "":
        raise ParameterError(f"{name} is required")
    return value


class Resource:
    """Base class binding a resource namespace to a request executor."""

    def __init__(self, requester: Requester):
        self._requester = requester

    def _request(self, endpoint: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        return self._requester.request(endpoint, params)


class Bookmarks(Resource):
    """bookmarks/* endpoints."""

    def list(self, params: Union[ListParams, Mapping[str, Any], None] = None, **kwargs) -> List[ListItem]:
        """
        List bookmarks in a folder.

        The result mixes the user, bookmarks, highlights and a meta entry;
        filter on each item's "type" field.
        """
        params = coerce_params(ListParams, params, kwargs)
        return self._request(BOOKMARKS_LIST_PATH, params.to_params())

    def update_read_progress(self, params: Union[UpdateReadProgressParams, Mapping[str, Any], None] = None,
                             **kwargs) -> List[Bookmark]:
        params = coerce_params(UpdateReadProgressParams, params, kwargs)
        return self._request(BOOKMARKS_UPDATE_READ_PROGRESS_PATH, params.to_params())

    def add(self, params: Union[AddBookmarkParams, Mapping[str, Any], None] = None, **kwargs) -> List[Bookmark]:
        """Add a bookmark by URL, or from supplied content for private sources."""
        params = coerce_params(AddBookmarkParams, params, kwargs)
        return self._request(BOOKMARKS_ADD_PATH, params.to_params())

    def delete(self, bookmark_id: Id) -> List[Any]:
        """Permanently delete a bookmark. The server answers with an empty list."""
        return self._request(BOOKMARKS_DELETE_PATH, {'bookmark_id': _id(bookmark_id, 'bookmark_id')})

    def star(self, bookmark_id: Id) -> List[Bookmark]:
        return self._request(BOOKMARKS_STAR_PATH, {'bookmark_id': _id(bookmark_id, 'bookmark_id')})

    def unstar(self, bookmark_id: Id) -> List[Bookmark]:
        return self._request(BOOKMARKS_UNSTAR_PATH, {'bookmark_id': _id(bookmark_id, 'bookmark_id')})

    def archive(self, bookmark_id: Id) -> List[Bookmark]:
        return self._request(BOOKMARKS_ARCHIVE_PATH, {'bookmark_id': _id(bookmark_id, 'bookmark_id')})

    def unarchive(self, bookmark_id: Id) -> List[Bookmark]:
        return self._request(BOOKMARKS_UNARCHIVE_PATH, {'bookmark_id': _id(bookmark_id, 'bookmark_id')})

    def move(self, bookmark_id: Id, folder_id: Id) -> List[Bookmark]:
        return self._request(BOOKMARKS_MOVE_PATH, {
            'bookmark_id': _id(bookmark_id, 'bookmark_id'),
            'folder_id': _id(folder_id, 'folder_id'),
        })

    def get_text(self, bookmark_id: Id) -> str:
        """Return the processed text-view HTML of a bookmark."""
        return self._request(BOOKMARKS_GET_TEXT_PATH, {'bookmark_id': _id(bookmark_id, 'bookmark_id')})


class Folders(Resource):
    """folders/* endpoints."""

    def list(self) -> List[Folder]:
        return self._request(FOLDERS_LIST_PATH)

    def add(self, title: str) -> List[Folder]:
        if not title:
            raise ParameterError("title is required")
        return self._request(FOLDERS_ADD_PATH, {'title': title})

    def delete(self, folder_id: Id) -> List[Any]:
        return self._request(FOLDERS_DELETE_PATH, {'folder_id': _id(folder_id, 'folder_id')})

    def set_order(self, order: Union[str, Iterable[Tuple[Id, int]]]) -> List[Folder]:
        """
        Reorder folders.

        Args:
            order: "folder_id:position,..." or an iterable of (folder_id, position)
        """
        return self._request(FOLDERS_SET_ORDER_PATH, {'order': format_folder_order(order)})


class Highlights(Resource):
    """Highlight endpoints (API 1.1)."""

    def list(self, bookmark_id: Id) -> List[Highlight]:
        path = HIGHLIGHTS_LIST_PATH.format(bookmark_id=_id(bookmark_id, 'bookmark_id'))
        return self._request(path)

    def add(self, params: Union[AddHighlightParams, Mapping[str, Any], None] = None, **kwargs) -> Highlight:
        params = coerce_params(AddHighlightParams, params, kwargs)
        path = HIGHLIGHTS_ADD_PATH.format(bookmark_id=params.bookmark_id)
        return self._request(path, params.to_params())

    def delete(self, highlight_id: Id) -> List[Any]:
        path = HIGHLIGHTS_DELETE_PATH.format(highlight_id=_id(highlight_id, 'highlight_id'))
        return self._request(path)
