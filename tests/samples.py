"""Golden fixed-width extract lines, one per record type.

Lines are assembled from ``{offset: text}`` maps so each value sits at the
offset the Getnet manual assigns to it; gaps are space-padded.
"""

from __future__ import annotations


def fixed_width(width: int, fields: dict[int, str]) -> str:
    """Place each text at its offset and pad the line to ``width``."""
    line = ""
    for offset in sorted(fields):
        if offset < len(line):
            raise ValueError(f"field at offset {offset} overlaps the previous one")
        line = line.ljust(offset) + fields[offset]
    if len(line) > width:
        raise ValueError(f"line is {len(line)} characters, wider than {width}")
    return line.ljust(width)


HEADER_LINE = fixed_width(116, {
    0: "0",
    1: "15032023",
    9: "143015",
    15: "14032023",
    23: "V10.0",
    31: "000000012345678",
    46: "10440482000154",
    60: "GETNET",
    80: "000000042",
    89: "01",
    91: "V1.2023",
})

SALES_SUMMARY_LINE = fixed_width(308, {
    0: "1",
    1: "000000012345678",
    16: "01",
    18: "POS",
    21: "000123456",
    30: "10032023",
    38: "10042023",
    46: "033",
    49: "001234",
    55: "00012345678",
    66: "000000010",
    75: "000000002",
    84: "000000150000",
    96: "000000145500",
    108: "000000000150",
    120: "000000004350",
    132: "000000000000",
    144: "000000145500",
    156: "000000000000",
    168: "PF",
    170: "01",
    172: "03",
    174: "000000099999999",
    189: "000000000000000",
    204: "00000000",
    212: "000000000000",
    224: "000000000000",
    236: "000000000000000000",
    254: "000000000000",
    266: "000000000000777",
    281: "986",
    285: "+",
    286: "CC",
    288: "00000000000000012345",
})

SALES_VOUCHER_LINE = fixed_width(189, {
    0: "2",
    1: "000000012345678",
    16: "000123456",
    25: "000000987654",
    37: "10032023",
    45: "093045",
    51: "516292******1234",
    70: "000000010000",
    82: "000000000000",
    94: "000000000000",
    106: "03",
    108: "01",
    110: "000000003334",
    122: "10042023",
    130: "A1B2C3D4E5",
    140: "POS",
    143: "A",
    144: "000000099999999",
    159: "TERM0001",
    167: "840",
    170: "N",
    171: "+",
    172: "APL",
    175: "000000000123",
    187: "CV",
})

FINANCIAL_ADJUSTMENT_LINE = fixed_width(286, {
    0: "3",
    1: "000000012345678",
    16: "000123456",
    25: "10032023",
    33: "10042023",
    41: "AJ000000000000000001",
    62: "-",
    63: "000000002500",
    75: "01",
    77: "00000000",
    85: "516292******1234",
    104: "000123400",
    113: "000000987654",
    125: "09032023",
    133: "ZZ",
    135: "TERM0001",
    143: "10042023",
    151: "986",
    154: "000000000000",
    166: "AJ",
    168: "Chargeback ref 778899",
})

RECEIVABLES_ADVANCE_LINE = fixed_width(156, {
    0: "4",
    1: "000000012345678",
    16: "12032023",
    24: "13032023",
    32: "000000000004567",
    47: "000000100000",
    59: "000000002500",
    71: "000000097500",
    83: "00000001990",
    94: "000000099999999",
    109: "237",
    112: "004321",
    118: "0001234567",
    129: "WEB",
    132: "AC",
    134: "PG",
    136: "00000000000000098765",
})

ASSIGNMENT_NEGOTIATION_LINE = fixed_width(230, {
    0: "5",
    1: "000000012345678",
    16: "12032023",
    24: "13032023",
    32: "OP2023000001",
    52: "GV",
    54: "000000200000",
    66: "000000150000",
    78: "000000003000",
    90: "000000147000",
    102: "00000000150",
    113: "CC",
    115: "341",
    118: "000987",
    124: "12345-6",
    144: "API",
    147: "C",
    148: "IF",
    151: "000000000000000055",
    169: "1",
    170: "60701190000104",
    184: "PP",
    186: "001",
    189: "000042",
    195: "99887-7",
    215: "000000099999999",
})

RECEIVABLE_UNIT_LINE = fixed_width(100, {0: "6", 1: "000000012345678"})

TRAILER_LINE = "9000000008"

ALL_LINES = [
    HEADER_LINE,
    SALES_SUMMARY_LINE,
    SALES_VOUCHER_LINE,
    FINANCIAL_ADJUSTMENT_LINE,
    RECEIVABLES_ADVANCE_LINE,
    ASSIGNMENT_NEGOTIATION_LINE,
    RECEIVABLE_UNIT_LINE,
    TRAILER_LINE,
]

SAMPLE_EXTRACT = "\n".join(ALL_LINES) + "\n"
