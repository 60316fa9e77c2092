"""Data models for browsers and features."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Browser:
    name: str
    title: str
    abbr: str
    label: str
    prefix: str
    type: str
    usage: dict[str, float]
    versions: tuple[str, ...]

    @property
    def total_usage(self) -> float:
        return sum(self.usage.values())


@dataclass(frozen=True)
class Feature:
    name: str
    title: str
    status: str
    percent: float
    support: dict[tuple[str, str], str] = field(default_factory=dict)

    def versions_for(self, browser_name: str) -> list[str]:
        """Versions with declared support for a browser, in dataset order."""
        return [version for (name, version) in self.support if name == browser_name]


@dataclass(frozen=True)
class FeatureSummary:
    support: str
    title: str
    status: str
    percent: float
