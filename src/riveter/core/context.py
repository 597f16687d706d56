# src/riveter/core/context.py
"""
Event log de atribuição por instância.

Este módulo define o `AttributeEventLog`, a estrutura que registra, de
forma estruturada, o que aconteceu com os valores atribuídos a uma
instância host:
    - valores brutos não vazios que a coerção transformou em `None`
    - chaves desconhecidas descartadas por `filter_params`
    - chaves aplicadas por `apply_params`
    - falhas levantadas por setters (com payload serializável)

Princípios fundamentais:
    - Logs são eventos estruturados, não texto livre
    - Warnings são sinais não fatais e nunca interrompem a atribuição
    - Cada instância possui seu próprio log (sem estado global)

Invariantes:
    - Eventos incluem sempre `owner`, `attribute`, `level` e `timestamp`
    - Warnings são agrupados por nome de atributo
    - Com `enabled=False`, nenhuma chamada produz efeito
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional


@dataclass
class AttributeEventLog:
    """
    Log estruturado de eventos e warnings de uma instância host.

    Campos canônicos:
    - owner: nome da classe host
    - enabled: quando False, `log` e `add_warning` são no-ops
    - events: eventos em ordem de emissão
    - warnings: mensagens por nome de atributo
    """

    owner: str
    enabled: bool = True
    events: List[Dict[str, Any]] = field(default_factory=list)
    warnings: Dict[str, List[str]] = field(default_factory=dict)

    def log(self, *, attribute: Optional[str], level: str, message: str, **extra: Any) -> None:
        if not self.enabled:
            return
        event = {
            "owner": self.owner,
            "attribute": attribute,
            "level": level,
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        event.update(extra)
        self.events.append(event)

    def add_warning(self, *, attribute: str, message: str) -> None:
        if not self.enabled:
            return
        if attribute not in self.warnings:
            self.warnings[attribute] = []
        self.warnings[attribute].append(message)

    def warn(self, *, attribute: str, message: str, **extra: Any) -> None:
        """Registra o warning e o evento correspondente de uma só vez."""
        self.add_warning(attribute=attribute, message=message)
        self.log(attribute=attribute, level="warning", message=message, **extra)

    def clear(self) -> None:
        self.events.clear()
        self.warnings.clear()
