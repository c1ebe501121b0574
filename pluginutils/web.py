"""
``pluginutils.web``
===================

Cookie helpers. The request's cookies and the response sink are passed
in explicitly, rather than read from request-scoped globals.
"""
import io
import typing as ty
from contextlib import redirect_stdout
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from omegaconf import OmegaConf
from omegaconf.errors import OmegaConfBaseException
from rich.console import Console
from rich.tree import Tree

from pluginutils import base

__all__ = [
    "Cookie",
    "CookieOptions",
    "CookieResponse",
    "set_cookie",
    "get_cookie",
    "delete_cookie",
]


class Cookie(base.CookieAdapter):
    """Plain cookie, mirroring the host's cookie API.

    :group: Web

    Parameters
    ----------
    name : str
        The name of the cookie.
    value : str
        The value stored in the cookie.
    path : str
        The path for which the cookie is valid. Default is ``''``.
    max_age : int
        Lifetime in seconds. Default is -1, lasting for the browser
        session.
    """

    def __init__(
        self, name: str, value: str, path: str = "", max_age: int = -1
    ) -> None:
        self._name = name
        self._value = value
        self._path = path
        self._max_age = max_age

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cookie):
            return NotImplemented
        return self._astuple() == other._astuple()

    def __repr__(self) -> str:
        name = self.__class__.__name__
        return (
            f"{name}(name={self.name!r}, value={self.value!r}, "
            f"path={self.path!r}, max_age={self.max_age})"
        )

    def __rich__(self) -> str:
        return (
            f"[blue]{self.name} [default]= [green]'{self.value}' "
            f"[default](path=[yellow]'{self.path}'[default], "
            f"max_age={self.max_age})"
        )

    def _astuple(self) -> ty.Tuple[str, str, str, int]:
        return (self._name, self._value, self._path, self._max_age)

    @property
    def name(self) -> str:
        return self._name

    @property
    def value(self) -> str:
        return self._value

    @property
    def path(self) -> str:
        return self._path

    @property
    def max_age(self) -> int:
        return self._max_age

    def get_name(self) -> str:
        return self._name

    def set_path(self, path: str) -> None:
        self._path = path

    def set_max_age(self, max_age: int) -> None:
        self._max_age = max_age


@dataclass
class CookieOptions:
    """Optional attributes applied to new cookies.

    :group: Web

    Attributes
    ----------
    path : str, optional
        The path for which the cookie is valid. Ignored if empty.
    max_age : int, optional
        Lifetime of the cookie in seconds.
    """

    path: ty.Optional[str] = None
    max_age: ty.Optional[int] = None

    @classmethod
    def load(
        cls, source: ty.Union[str, Path, ty.Mapping[str, ty.Any]]
    ) -> "CookieOptions":
        """Reads options from a YAML file, or a mapping of the same
        shape.

        Parameters
        ----------
        source : pathlib.Path | str | Mapping
            Path to a YAML file, or the options as a mapping.

        Raises
        ------
        ValueError
            If ``source`` contains unknown keys, or values of the wrong
            type.
        """
        schema = OmegaConf.structured(cls)
        hide_stdout = io.StringIO()
        try:
            with redirect_stdout(hide_stdout):
                if isinstance(source, Mapping):
                    conf = OmegaConf.create(dict(source))
                else:
                    conf = OmegaConf.load(source)
            options = OmegaConf.to_object(OmegaConf.merge(schema, conf))
        except OmegaConfBaseException as error:
            raise ValueError(f"Invalid cookie options: {error}") from error
        return options  # type: ignore


@dataclass(repr=False)
class CookieResponse(base.ResponseAdapter):
    """Response sink collecting cookies in memory.

    :group: Web
    """

    cookies: ty.List[base.CookieAdapter] = field(default_factory=list)

    def __rich__(self) -> Tree:
        name = self.__class__.__name__
        tree = Tree(f"{name}(cookies={len(self.cookies)})")
        for cookie in self.cookies:
            tree.add(cookie)
        return tree

    def __repr__(self) -> str:
        console = Console(color_system=None)
        with console.capture() as capture:
            console.print(self)
        return capture.get()

    def add_http_cookie(self, cookie: base.CookieAdapter) -> None:
        self.cookies.append(cookie)


def set_cookie(
    response: base.ResponseAdapter,
    name: str,
    value: str,
    options: ty.Optional[CookieOptions] = None,
    cookie_factory: ty.Callable[[str, str], base.CookieAdapter] = Cookie,
) -> base.CookieAdapter:
    """Creates a cookie and adds it to ``response``.

    :group: Web

    Parameters
    ----------
    response : ResponseAdapter
        Sink for the outgoing cookie.
    name : str
        The name of the cookie.
    value : str
        The value stored in the cookie.
    options : CookieOptions, optional
        Path and lifetime of the cookie. Unset options keep the
        cookie's defaults.
    cookie_factory : callable
        Called as ``cookie_factory(name, value)`` to build the cookie.
        Default is ``Cookie``.

    Returns
    -------
    cookie : CookieAdapter
        The cookie added to ``response``.
    """
    cookie = cookie_factory(name, value)
    if options is not None:
        if options.path:
            cookie.set_path(options.path)
        if options.max_age is not None:
            cookie.set_max_age(options.max_age)
    response.add_http_cookie(cookie)
    return cookie


def get_cookie(
    cookies: ty.Optional[ty.Iterable[base.CookieAdapter]], name: str
) -> ty.Optional[base.CookieAdapter]:
    """Returns the first of the request's ``cookies`` called ``name``,
    or ``None`` if there is no such cookie.

    :group: Web
    """
    if cookies is None:
        return None
    for cookie in cookies:
        if cookie.get_name() == name:
            return cookie
    return None


def delete_cookie(
    response: base.ResponseAdapter,
    name: str,
    options: ty.Optional[CookieOptions] = None,
    cookie_factory: ty.Callable[[str, str], base.CookieAdapter] = Cookie,
) -> base.CookieAdapter:
    """Instructs the browser to drop the cookie ``name``, by sending an
    empty, expired cookie in its place. A ``path`` in ``options`` is
    kept, as browsers only match cookies with the same path.

    :group: Web
    """
    path = None if options is None else options.path
    expired = CookieOptions(path=path, max_age=0)
    return set_cookie(response, name, "", expired, cookie_factory)
