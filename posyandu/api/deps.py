from posyandu.models.who_standards import ReferenceTableStore, standards

def get_standards() -> ReferenceTableStore:
    return standards
