from __future__ import annotations


class DomainError(Exception):
    """Base para erros de dominio."""


class InvalidAddressError(DomainError):
    """Endereco on-chain malformado."""


class UpstreamFault(DomainError):
    """Falha de transporte ou de formato em uma fonte externa."""


class ChainReadFault(UpstreamFault):
    """Falha ao ler estado de contrato via RPC."""
