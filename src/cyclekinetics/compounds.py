# src/cyclekinetics/compounds.py
"""
Default compound catalogue (elimination half-lives in hours) and amount-unit
conversion to mg-equivalents.
"""
from .config import UNIT_CONFIG
from .types import Compound

DEFAULT_COMPOUNDS: tuple[Compound, ...] = (
    # Injectables
    Compound("Testosterone Enanthate", "injectable", 108),   # ~4.5 days
    Compound("Testosterone Cypionate", "injectable", 120),   # ~5 days
    Compound("Testosterone Propionate", "injectable", 19),
    Compound("Testosterone Phenylpropionate", "injectable", 72),
    Compound("Testosterone Isocaproate", "injectable", 216),
    Compound("Testosterone Decanoate", "injectable", 312),
    Compound("Testosterone Undecanoate", "injectable", 480),
    Compound("Sustanon (Testosterone Blend)", "injectable", 168),
    Compound("Testosterone Suspension", "injectable", 1),
    Compound("Nandrolone Decanoate (Deca)", "injectable", 144),
    Compound("Nandrolone Phenylpropionate (NPP)", "injectable", 27),
    Compound("Nandrolone Undecanoate", "injectable", 360),
    Compound("Trenbolone Acetate", "injectable", 24),
    Compound("Trenbolone Enanthate", "injectable", 120),
    Compound("Trenbolone Hexahydrobenzylcarbonate (Parabolan)", "injectable", 168),
    Compound("Boldenone Undecylenate (Equipoise)", "injectable", 336),
    Compound("Boldenone Cypionate", "injectable", 192),
    Compound("Drostanolone Propionate (Masteron)", "injectable", 19),
    Compound("Drostanolone Enanthate (Masteron E)", "injectable", 120),
    Compound("Methenolone Enanthate (Primobolan)", "injectable", 120),
    Compound("Methenolone Acetate (Primobolan)", "injectable", 48),
    Compound("Stanozolol (Injectable)", "injectable", 24),
    # Orals
    Compound("Methandienone (Dianabol)", "oral", 4.5),
    Compound("Oxandrolone (Anavar)", "oral", 9),
    Compound("Stanozolol (Winstrol)", "oral", 9),
    Compound("Oxymetholone (Anadrol)", "oral", 8.5),
    Compound("Turinabol", "oral", 16),
    Compound("Methenolone Acetate (Primobolan Oral)", "oral", 6),
    Compound("Mesterolone (Proviron)", "oral", 12),
    Compound("Fluoxymesterone (Halotestin)", "oral", 9),
    Compound("Methyldrostanolone (Superdrol)", "oral", 8),
    # Peptides (active life varies a lot between sources)
    Compound("HGH (Human Growth Hormone)", "peptide", 3),
    Compound("BPC-157", "peptide", 4),
    Compound("TB-500", "peptide", 24),
    Compound("Ipamorelin", "peptide", 2),
    Compound("CJC-1295 (DAC)", "peptide", 144),
    Compound("CJC-1295 (No DAC)", "peptide", 0.5),
    Compound("HCG", "peptide", 36),
    Compound("Semaglutide", "peptide", 168),
    Compound("Tirzepatide", "peptide", 120),
    Compound("Liraglutide", "peptide", 13),
    Compound("Tesamorelin", "peptide", 2),
    Compound("Sermorelin", "peptide", 0.5),
    Compound("GHRP-2", "peptide", 0.5),
    Compound("GHRP-6", "peptide", 0.5),
    Compound("Hexarelin", "peptide", 0.5),
    Compound("IGF-1 LR3", "peptide", 20),
    Compound("Melanotan II", "peptide", 36),
    Compound("PT-141 (Bremelanotide)", "peptide", 12),
    Compound("Thymosin Alpha-1", "peptide", 2),
    Compound("Epitalon", "peptide", 1),
    Compound("AOD-9604", "peptide", 8),
)


def find_compound(name: str, catalogue=DEFAULT_COMPOUNDS) -> Compound:
    """Case-insensitive lookup by name."""
    wanted = name.strip().casefold()
    for c in catalogue:
        if c.name.casefold() == wanted:
            return c
    raise KeyError(f"Unknown compound '{name}'.")


def to_mg_equivalent(amount: float, unit: str) -> float:
    """
    Convert an amount to mg-equivalents: mcg / 1000, IU * 0.333, mg as-is.
    """
    factor = UNIT_CONFIG.get(unit)
    if factor is None:
        raise ValueError(f"amount_unit must be one of {sorted(UNIT_CONFIG)} (got {unit!r}).")
    return amount * factor
