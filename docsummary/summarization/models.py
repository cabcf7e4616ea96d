from dataclasses import dataclass


@dataclass(frozen=True)
class Prompt:
    """A rendered prompt in both provider shapes.

    Chat-style providers send ``system`` and ``user`` as separate messages;
    completion-style providers take the single string from ``as_text``.
    """

    system: str
    user: str

    def as_text(self) -> str:
        if not self.system:
            return self.user
        return f"{self.system}\n\n{self.user}"
