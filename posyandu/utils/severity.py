from posyandu.schemas.classification import IndicatorResult, Severity

NORMAL_LABELS = {
    "Normal",
    "Gizi baik (normal)",
    "Naik",
    "Tinggi",
    "Baru Ditimbang",
}

RISK_LABELS = {
    "O",
    "Tidak Naik",
    "Risiko berat badan lebih",
    "Berisiko gizi lebih",
    "Berat Badan Lebih",
    "Pra-Hipertensi",
    "Pra-Diabetes",
    "Batas Tinggi",
}


def severity_of(label: str) -> Severity:
    # Anything not explicitly normal or borderline needs follow-up
    if label in NORMAL_LABELS:
        return Severity.NORMAL
    if label in RISK_LABELS:
        return Severity.RISK
    return Severity.ALERT


def indicator(label: str) -> IndicatorResult:
    return IndicatorResult(label=label, severity=severity_of(label))
