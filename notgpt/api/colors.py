from enum import Enum

class ReplyColor(Enum):
    OK = "green"
    INFO = "cyan"

    def __str__(self):
        return self.value
