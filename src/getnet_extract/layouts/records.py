"""Record layouts of the Getnet Extrato Eletrônico (manual V.10.0 | V1.2023).

Offsets are 0-based character positions on the line and are part of the
acquirer's file contract: they must match the manual exactly.
"""

from __future__ import annotations

from enum import IntEnum
from types import MappingProxyType
from typing import Literal, Mapping

from pydantic import BaseModel, Field

from getnet_extract.codec.fields import CODECS, extract_slice
from getnet_extract.core.exceptions import DecodeError
from getnet_extract.core.types import Record, RecordTag
from getnet_extract.models.decoded import DecodeIssue

CodecName = Literal[
    "integer", "currency", "string", "raw", "optional", "date", "time",
    "currency_code", "payment_type", "account_type", "operation_type",
    "institution_type", "document_type",
]


class RecordType(IntEnum):
    """Record type tags, the first character of every line."""

    HEADER = 0
    SALES_SUMMARY = 1
    SALES_VOUCHER = 2
    FINANCIAL_ADJUSTMENT = 3
    RECEIVABLES_ADVANCE = 4
    ASSIGNMENT_NEGOTIATION = 5
    RECEIVABLE_UNIT = 6
    TRAILER = 9

    @property
    def tag(self) -> RecordTag:
        return str(self.value)


class FieldSpec(BaseModel):
    """One positional field: where it sits on the line and how to read it."""

    model_config = {"frozen": True}

    name: str
    offset: int = Field(ge=0)
    length: int = Field(gt=0)
    codec: CodecName = "raw"

    @property
    def end(self) -> int:
        return self.offset + self.length


class LayoutResult(BaseModel):
    """Outcome of decoding one line: the record and any field issues."""

    record: Record
    issues: list[DecodeIssue] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.issues


class RecordLayout(BaseModel):
    """Ordered field specs for one record type."""

    model_config = {"frozen": True}

    record_type: RecordType
    name: str
    fields: tuple[FieldSpec, ...]

    @property
    def width(self) -> int:
        """Minimum line length that covers every field."""
        return max(spec.end for spec in self.fields)

    def decode(self, line: str, line_number: int = 0) -> LayoutResult:
        """Decode ``line`` left to right.

        A date or time field that fails validation is set to ``None`` and
        reported in ``LayoutResult.issues``; the remaining fields still decode.
        """
        record: Record = {}
        issues: list[DecodeIssue] = []
        for spec in self.fields:
            raw = extract_slice(line, spec.offset, spec.length)
            try:
                record[spec.name] = CODECS[spec.codec](raw)
            except DecodeError as exc:
                record[spec.name] = None
                issues.append(DecodeIssue(
                    line_number=line_number,
                    record_type=int(self.record_type),
                    field=spec.name,
                    raw=exc.raw,
                    message=str(exc),
                ))
        return LayoutResult(record=record, issues=issues)


def _f(name: str, offset: int, length: int, codec: CodecName = "raw") -> FieldSpec:
    return FieldSpec(name=name, offset=offset, length=length, codec=codec)


_RECORD_TYPE = _f("TipoRegistro", 0, 1, "integer")

# ---------------------------------------------------------------------------
# Tipo 0 - Header: informação referente ao conteúdo do arquivo
# ---------------------------------------------------------------------------
HEADER = RecordLayout(
    record_type=RecordType.HEADER,
    name="Header",
    fields=(
        _RECORD_TYPE,
        _f("DataCriacaoArquivo", 1, 8, "date"),
        _f("HoraCriacaoArquivo", 9, 6, "time"),
        _f("DataReferenciaMovimento", 15, 8, "date"),
        _f("VersaoArquivo", 23, 8),
        _f("CodigoEstabelecimento", 31, 15, "string"),
        _f("CNPJAdquirente", 46, 14, "integer"),
        _f("NomeAdquirente", 60, 20, "string"),
        _f("Sequencia", 80, 9, "integer"),
        _f("CodigoAdquirente", 89, 2),
        _f("VersaoLayout", 91, 25, "string"),
    ),
)

# ---------------------------------------------------------------------------
# Tipo 1 - Resumo de Vendas: resumo dos lançamentos detalhados nos tipos 2-5
# ---------------------------------------------------------------------------
SALES_SUMMARY = RecordLayout(
    record_type=RecordType.SALES_SUMMARY,
    name="Resumo de Vendas",
    fields=(
        _RECORD_TYPE,
        _f("CodigoEstabelecimento", 1, 15, "string"),
        _f("CodigoProduto", 16, 2),
        _f("FormaCaptura", 18, 3),
        _f("NumeroRV", 21, 9, "integer"),
        _f("DataRV", 30, 8, "date"),
        _f("DataPagamentoRV", 38, 8, "date"),
        _f("Banco", 46, 3, "integer"),
        _f("Agencia", 49, 6, "integer"),
        _f("ContaCorrente", 55, 11),
        _f("NumeroCVAceitos", 66, 9, "integer"),
        _f("NumeroCVRejeitados", 75, 9, "integer"),
        _f("ValorBruto", 84, 12, "currency"),
        _f("ValorLiquido", 96, 12, "currency"),
        _f("ValorTarifa", 108, 12, "currency"),
        _f("ValorTaxaDesconto", 120, 12, "currency"),
        _f("ValorRejeitado", 132, 12, "currency"),
        _f("ValorCredito", 144, 12, "currency"),
        _f("ValorEncargos", 156, 12, "currency"),
        _f("IndicadorTipoPagamento", 168, 2, "payment_type"),
        _f("NumeroParcelaRV", 170, 2, "integer"),
        _f("QuantidadesParcelasRV", 172, 2, "integer"),
        _f("CodigoEstabelecimentoComercialCentralizadorPagamentos", 174, 15, "string"),
        _f("NumeroOperacaoAntecipacao", 189, 15, "integer"),
        _f("DataVencimentoOriginalRVAntecipado", 204, 8, "date"),
        _f("CustoOperacao", 212, 12, "currency"),
        _f("ValorLiquidoRVAntecipado", 224, 12, "currency"),
        _f("NumeroControleOperacaoCobranca", 236, 18, "integer"),
        _f("ValorLiquidoCobranca", 254, 12, "currency"),
        _f("IdCompensacao", 266, 15, "integer"),
        _f("Moeda", 281, 3, "currency_code"),
        _f("IdentificadorBaixaCobrancaServicoExterna", 284, 1, "optional"),
        _f("SinalTransacao", 285, 1),
        _f("Metadado1", 286, 2, "string"),
        _f("ContaPagamento", 288, 20, "integer"),
    ),
)

# ---------------------------------------------------------------------------
# Tipo 2 - Comprovante de Vendas: detalhe das vendas do tipo 1
# ---------------------------------------------------------------------------
SALES_VOUCHER = RecordLayout(
    record_type=RecordType.SALES_VOUCHER,
    name="Comprovante de Vendas",
    fields=(
        _RECORD_TYPE,
        _f("CodigoEstabelecimento", 1, 15, "string"),
        _f("NumeroRv", 16, 9, "integer"),
        _f("NSUAdquirente", 25, 12, "integer"),
        _f("DataTransacao", 37, 8, "date"),
        _f("HoraTransacao", 45, 6, "time"),
        _f("NumeroCartao", 51, 19, "string"),
        _f("ValorTransacao", 70, 12, "currency"),
        _f("ValorSaque", 82, 12, "currency"),
        _f("ValorTaxaEmbarque", 94, 12, "currency"),
        _f("NumeroTotalParcelas", 106, 2, "integer"),
        _f("NumeroParcela", 108, 2, "integer"),
        _f("ValorParcela", 110, 12, "currency"),
        _f("DataPagamento", 122, 8, "date"),
        _f("CodigoAutorizacao", 130, 10),
        _f("FormaCaptura", 140, 3),
        _f("StatusTransacao", 143, 1),
        _f("CodigoEstabelecimentoComercialCentralizadorPagamentos", 144, 15, "string"),
        _f("CodigoTerminal", 159, 8),
        _f("Moeda", 167, 3, "currency_code"),
        _f("OrigemEmissorCartao", 170, 1),
        _f("SinalTransacao", 171, 1),
        _f("CarteiraDigital", 172, 3, "string"),
        _f("ValorComissaoVenda", 175, 12, "currency"),
        _f("IdentificadorTipoProximoConteudo", 187, 2),
    ),
)

# ---------------------------------------------------------------------------
# Tipo 3 - Ajustes Financeiros: créditos, débitos, chargebacks, cancelamentos
# ---------------------------------------------------------------------------
FINANCIAL_ADJUSTMENT = RecordLayout(
    record_type=RecordType.FINANCIAL_ADJUSTMENT,
    name="Ajustes Financeiros",
    fields=(
        _RECORD_TYPE,
        _f("CodigoEstabelecimento", 1, 15),
        _f("NumeroRVAjustado", 16, 9),
        _f("DataRV", 25, 8, "date"),
        _f("DataPagamentoRV", 33, 8, "date"),
        _f("IdentificadorAjuste", 41, 20),
        _f("Brancos", 61, 1),
        _f("SinalTransacao", 62, 1),
        _f("ValorAjuste", 63, 12, "currency"),
        _f("MotivoAjuste", 75, 2),
        _f("DataCarta", 77, 8, "date"),
        _f("NumeroCartao", 85, 19),
        _f("NumeroRVOriginal", 104, 9, "integer"),
        _f("NumeroCV", 113, 12, "integer"),
        _f("DataTransacaoOriginal", 125, 8, "date"),
        _f("IndicadorTipoPagamento", 133, 2, "payment_type"),
        _f("NumeroTerminal", 135, 8),
        _f("DataPagamentoOriginal", 143, 8, "date"),
        _f("Moeda", 151, 3, "currency_code"),
        _f("ValorComissaoVenda", 154, 12, "currency"),
        _f("IdentificadorTipoProximoConteudo", 166, 2),
        _f("ConteudoDinamico", 168, 118, "string"),
    ),
)

# ---------------------------------------------------------------------------
# Tipo 4 - Antecipação de Recebíveis: operações de antecipação consolidadas
# ---------------------------------------------------------------------------
RECEIVABLES_ADVANCE = RecordLayout(
    record_type=RecordType.RECEIVABLES_ADVANCE,
    name="Antecipação de Recebíveis",
    fields=(
        _RECORD_TYPE,
        _f("CodigoEstabelecimento", 1, 15),
        _f("DataOperacao", 16, 8, "date"),
        _f("DataCredito", 24, 8, "date"),
        _f("NumeroOperacao", 32, 15, "integer"),
        _f("ValorBrutoAntecipacao", 47, 12, "currency"),
        _f("ValorTaxaAntecipacao", 59, 12, "currency"),
        _f("ValorLiquidoAntecipacao", 71, 12, "currency"),
        _f("TaxaOperacaoMes", 83, 11),
        _f("CodigoEstabelecimentoComercialCentralizadorPagamentos", 94, 15, "string"),
        _f("Banco", 109, 3, "integer"),
        _f("Agencia", 112, 6, "integer"),
        _f("ContaCorrente", 118, 11, "string"),
        _f("CanalAntecipacao", 129, 3),
        _f("IndicadorTipoPagamento", 132, 2),
        _f("Metadado1", 134, 2, "account_type"),
        _f("ContaPagamento", 136, 20, "integer"),
    ),
)

# ---------------------------------------------------------------------------
# Tipo 5 - Negociações de Cessão e Gravame
# ---------------------------------------------------------------------------
ASSIGNMENT_NEGOTIATION = RecordLayout(
    record_type=RecordType.ASSIGNMENT_NEGOTIATION,
    name="Negociações de Cessão e Gravame",
    fields=(
        _RECORD_TYPE,
        _f("CodigoEstabelecimento", 1, 15, "string"),
        _f("DataOperacao", 16, 8, "date"),
        _f("DataCredito", 24, 8, "date"),
        _f("NumeroOperacao", 32, 20, "string"),
        _f("TipoOperacao", 52, 2, "operation_type"),
        _f("ValorBrutoTotalOperacao", 54, 12, "currency"),
        _f("ValorBrutoOperacao", 66, 12, "currency"),
        _f("ValorCustoOperacao", 78, 12, "currency"),
        _f("ValorLiquidoOperacao", 90, 12, "currency"),
        _f("TaxaOperacaoMes", 102, 11),
        _f("TipoContaEstabelecimento", 113, 2, "account_type"),
        _f("Banco", 115, 3, "integer"),
        _f("Agencia", 118, 6, "integer"),
        _f("ContaCorrente", 124, 20, "string"),
        _f("CanalOperacao", 144, 3, "optional"),
        _f("TipoMovimento", 147, 1),
        _f("TipoInstituicaoParticipante", 148, 3, "institution_type"),
        _f("IDInstituicaoParticipante", 151, 18, "integer"),
        _f("TipoDocInstituicaoParticipante", 169, 1, "document_type"),
        _f("DocInstituicaoParticipante", 170, 14, "integer"),
        _f("TipoContaInstituicaoParticipante", 184, 2, "account_type"),
        _f("BancoInstituicaoParticipante", 186, 3, "integer"),
        _f("AgenciaInstituicaoParticipante", 189, 6, "integer"),
        _f("ContaInstituicaoParticipante", 195, 20, "string"),
        _f("CodigoEstabelecimentoComercialCentralizadorPagamentos", 215, 15, "string"),
    ),
)

# ---------------------------------------------------------------------------
# Tipo 6 - Unidades Recebíveis negociadas em Cessão
# Only the type tag is read: the field layout is not mapped yet.
# ---------------------------------------------------------------------------
RECEIVABLE_UNIT = RecordLayout(
    record_type=RecordType.RECEIVABLE_UNIT,
    name="Unidades Recebíveis",
    fields=(_RECORD_TYPE,),
)

# ---------------------------------------------------------------------------
# Tipo 9 - Trailer: fim do arquivo e total de registros
# ---------------------------------------------------------------------------
TRAILER = RecordLayout(
    record_type=RecordType.TRAILER,
    name="Trailer",
    fields=(
        _RECORD_TYPE,
        _f("QuantidadeRegistros", 1, 9, "integer"),
    ),
)

LAYOUTS: tuple[RecordLayout, ...] = (
    HEADER,
    SALES_SUMMARY,
    SALES_VOUCHER,
    FINANCIAL_ADJUSTMENT,
    RECEIVABLES_ADVANCE,
    ASSIGNMENT_NEGOTIATION,
    RECEIVABLE_UNIT,
    TRAILER,
)

DISPATCH_TABLE: Mapping[RecordTag, RecordLayout] = MappingProxyType(
    {layout.record_type.tag: layout for layout in LAYOUTS}
)
