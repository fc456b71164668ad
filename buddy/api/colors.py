from enum import Enum

class PanelColor(Enum):
    OK = "green"
    ERROR = "red"
    GREETING = "cyan"
    FAREWELL = "yellow"

    def __str__(self):
        return self.value


def response_color(ok: bool, exit: bool = False) -> PanelColor:
    """Kolor ramki panelu dla odpowiedzi sesji."""
    match (ok, exit):
        case (_, True):
            return PanelColor.FAREWELL
        case (True, _):
            return PanelColor.OK
        case _:
            return PanelColor.ERROR
