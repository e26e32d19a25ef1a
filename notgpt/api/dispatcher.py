from notgpt.services.task_service import TaskService
from notgpt.services import number_command
from notgpt.domain.errors import TaskValidationError, DomainError
import logging

logger = logging.getLogger(__name__)

HELP = (
    "i only know: todo, deadline, event, list, find, mark, unmark, delete, clear, bye\n"
    "*the first word will always be read as the command*"
)
GOODBYE = "bye. hope i never see u again"


### COMMENTS
# ==========================================================
# Dispatcher komend: jedno wejście dla CLI i trybu czatu.
# ==========================================================
# - Dostaje parę (komenda, reszta tekstu) i zwraca tekst odpowiedzi.
# - Zero logiki listy zadań, deleguje do TaskService / number_command.
# - Łapie DomainError i zamienia go na komunikat; nic nie jest rzucane dalej.


class Dispatcher:
    def __init__(self, service: TaskService) -> None:
        self.service = service

    def handle(self, command: str, text: str = "") -> str:
        """Wykonuje komendę i zwraca odpowiedź do wyświetlenia."""
        command = command.strip().lower()
        text = text.strip()
        try:
            match command:
                case "todo" | "deadline" | "event":
                    task = getattr(self.service, command)(text)
                    return f"added: {task.display()}\nnow u have {self.service.size()} tasks in the list"
                case "mark" | "unmark" | "delete":
                    return number_command.execute(self.service, text, command)
                case "find":
                    return self.service.find(text) or f'no tasks match "{text}"'
                case "list":
                    return self.service.list_all() or "ur list is empty"
                case "clear":
                    self.service.clear()
                    return "cleared everything, ur list is empty now"
                case "bye":
                    return GOODBYE
                case _:
                    return f"what is {command!r}?\n{HELP}"
        except TaskValidationError as e:
            return str(e)
        except DomainError as e:
            logger.error("command %r failed: %s", command, e)
            return f"something went wrong: {e}"
