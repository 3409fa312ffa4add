from dataclasses import fields
from typing import Any, TypeVar

T = TypeVar("T", bound="EntityMixin")


class EntityMixin:
    """
    Conversões das entidades de check-up para payloads e linhas do ORM.

    As entidades são planas (sem dataclasses aninhadas), então a conversão
    é campo a campo; as linhas do Django expõem os mesmos nomes de atributo.
    """

    @classmethod
    def field_names(cls) -> tuple[str, ...]:
        return tuple(f.name for f in fields(cls))

    @classmethod
    def from_dict(cls: type[T], data: dict[str, Any]) -> T:
        """Chaves desconhecidas (ex.: campos extras do DTO) são ignoradas."""
        return cls(**{name: data[name] for name in cls.field_names() if name in data})

    @classmethod
    def from_model(cls: type[T], model: Any) -> T:
        return cls(**{name: getattr(model, name) for name in cls.field_names()})

    def to_dict(self, *, exclude: tuple[str, ...] = (), drop_none: tuple[str, ...] = ()) -> dict[str, Any]:
        """
        Payload para `objects.create` / `update_or_create`.

        `drop_none` remove campos vazios para que o banco aplique o default
        (timestamps `auto_now_add`, por exemplo).
        """
        data = {name: getattr(self, name) for name in self.field_names() if name not in exclude}
        for name in drop_none:
            if data.get(name) is None:
                data.pop(name, None)
        return data
