from dataclasses import dataclass

DEFAULT = "default"
DESTRUCTIVE = "destructive"


@dataclass(frozen=True)
class Notice:
    """Transient message shown to the user after an action."""

    title: str
    description: str = ""
    variant: str = DEFAULT

    @property
    def is_error(self) -> bool:
        return self.variant == DESTRUCTIVE


def success(title: str, description: str = "") -> Notice:
    return Notice(title=title, description=description)


def failure(title: str, description: str = "") -> Notice:
    return Notice(title=title, description=description, variant=DESTRUCTIVE)
