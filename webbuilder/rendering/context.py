"""The named values handed to every template render."""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from typing import Any

from webbuilder.models import News, SiteConfig, Version

CONTEXT_KEYS = ("config", "versions", "version", "news")


class RenderContext(Mapping[str, Any]):
    """Read-only mapping of ``config``, ``versions``, ``version`` and ``news``.

    A context is never modified after construction. Per-version renders get
    a derived context from :meth:`with_version` that shares every other
    entry with its base.
    """

    __slots__ = ("_values",)

    def __init__(
        self,
        config: SiteConfig,
        versions: tuple[Version, ...],
        version: Version,
        news: tuple[News, ...],
    ) -> None:
        object.__setattr__(
            self,
            "_values",
            {"config": config, "versions": versions, "version": version, "news": news},
        )

    @classmethod
    def build(
        cls,
        config: SiteConfig,
        versions: Sequence[Version],
        default_version: Version,
        news: Sequence[News],
    ) -> RenderContext:
        missing = [
            name
            for name, value in (
                ("config", config),
                ("versions", versions),
                ("default_version", default_version),
                ("news", news),
            )
            if value is None
        ]
        if missing:
            raise ValueError(f"RenderContext.build() missing: {', '.join(missing)}")
        return cls(config, tuple(versions), default_version, tuple(news))

    def with_version(self, version: Version) -> RenderContext:
        if version is None:
            raise ValueError("with_version() requires a version")
        return RenderContext(self.config, self.versions, version, self.news)

    @property
    def config(self) -> SiteConfig:
        return self._values["config"]

    @property
    def versions(self) -> tuple[Version, ...]:
        return self._values["versions"]

    @property
    def version(self) -> Version:
        return self._values["version"]

    @property
    def news(self) -> tuple[News, ...]:
        return self._values["news"]

    def __getitem__(self, key: str) -> Any:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(CONTEXT_KEYS)

    def __len__(self) -> int:
        return len(CONTEXT_KEYS)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is read-only")

    def __repr__(self) -> str:
        return (
            f"RenderContext(version={self.version.version_full!r}, "
            f"versions={len(self.versions)}, news={len(self.news)})"
        )


def with_version(base: RenderContext, version: Version) -> RenderContext:
    return base.with_version(version)


__all__ = ["CONTEXT_KEYS", "RenderContext", "with_version"]
