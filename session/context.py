import threading

from people.ids import generate_id
from people.registry import PersonRegistry


class SessionContext:
    """
    Browser-session-scoped state.
    Must persist across requests.
    """

    def __init__(self, id_factory=generate_id):
        # People registered during this session
        self.registry = PersonRegistry(id_factory=id_factory)

        # "Listar" toggles this; the list starts hidden
        self.list_visible = False

        # Flask may serve one session on several threads
        self.lock = threading.Lock()

    def toggle_list(self) -> bool:
        self.list_visible = not self.list_visible
        return self.list_visible
