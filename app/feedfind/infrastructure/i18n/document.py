"""Document-level language and direction attributes.

The rendering shell reads these to set ``lang`` and ``dir`` on its root
element.
"""

from dataclasses import asdict, dataclass
from typing import Dict

from feedfind.infrastructure.i18n.models import Locale


@dataclass
class DocumentAttributes:
    lang: str = Locale.EN.value
    dir: str = "ltr"

    def apply(self, locale: Locale) -> None:
        self.lang = locale.value
        self.dir = locale.direction

    def as_dict(self) -> Dict[str, str]:
        return asdict(self)
