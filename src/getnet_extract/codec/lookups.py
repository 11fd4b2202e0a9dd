"""Static code -> label tables from the Getnet extract manual."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

UNDEFINED_LABEL = "Indefinido"

# Indicadores de tipo de pagamento
PAYMENT_TYPES: Mapping[str, str] = MappingProxyType({
    "PF": "Previsão de Pagamento Futuro",
    "PG": "Pagamento Normal",
    "AC": "Antecipação de Crédito",
    "RA": "Rejeição de Antecipação",
    "PR": "Pagamento da Antecipação Rejeitada",
    "PD": "Pagamento Pendente",
    "CI": "Cobrança Interna",
    "CS": "Cessão de crédito",
})

# Indicadores de tipo de conta para pagamento ou conta corrente
ACCOUNT_TYPES: Mapping[str, str] = MappingProxyType({
    "CC": "Conta Corrente",
    "PP": "Conta Poupança",
    "PG": "Conta Pagamento",
    "CD": "Conta Depósito",
    "CS": "Conta Super",
})

# Indicadores de tipo de operação (cessão / gravame)
OPERATION_TYPES: Mapping[str, str] = MappingProxyType({
    "CS": "Cessão",
    "GV": "Gravame",
    "CF": "Cessão fumaça",
    "PG": "Pagamento (pagamentos não negociados)",
})

BRL_ISO_NUMERIC = "986"

FINANCIAL_INSTITUTION = "Instituição Financeira"
NON_FINANCIAL_INSTITUTION = "Instituição Não Financeira"
