class CheckupAlertError(Exception):
    """Classe base para todas as exceções do domínio de alertas."""
    pass

class NotFoundError(CheckupAlertError):
    """Paciente, alerta ou configuração de clínica inexistente."""
    pass

class PersistenceError(CheckupAlertError):
    """Falha de leitura/escrita no repositório."""
    pass

class DuplicatePendingAlertError(PersistenceError):
    """
    O paciente já possui um alerta pendente.
    Levantado pelo repositório quando a unicidade seria violada.
    """
    pass

class ChannelError(CheckupAlertError):
    """Falha ao enviar por um canal de notificação (whatsapp, email)."""

    def __init__(self, channel: str, message: str) -> None:
        super().__init__(f"[{channel}] {message}")
        self.channel = channel
