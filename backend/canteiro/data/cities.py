"""Municipal cost factors and tax schedules for the Greater Florianópolis region.

Rates come from each municipality's tax code (Códigos Tributários
Municipais) and Santa Catarina Lei Complementar 755/2019.
"""

from __future__ import annotations

from pydantic import BaseModel


class CityTaxes(BaseModel):
    """Per-municipality fee and tax parameters.

    ``iss`` is a rate; ``*_m2`` values are R$/m2 of real area; the rest are
    fixed amounts in R$.
    """

    iss: float = 0.02
    alvara_base: float = 0.0
    alvara_m2: float = 0.0
    habitese_m2: float = 0.0
    habitese_minimo: float | None = None
    habitese_fixo: float | None = None
    habitese_sanitario_m2: float = 1.14
    habitese_sanitario_vistoria: float = 150.0
    inss_aliquota: float = 0.11
    inss_base_percent: float = 0.50
    art_rrt_base: float = 430.0
    art_rrt_medio: float = 650.0


class City(BaseModel):
    key: str
    name: str
    factor: float
    taxes: CityTaxes


# Neutral record used when a city key has no entry: cost factor 1.0 and the
# fallback rates the fee formulas default to.
DEFAULT_CITY = City(key="", name="", factor=1.0, taxes=CityTaxes())

CITIES: dict[str, City] = {
    "palhoca": City(
        key="palhoca",
        name="Palhoça",
        factor=1.05,
        taxes=CityTaxes(
            iss=0.05,  # LC 2218/2005
            alvara_base=150,
            alvara_m2=2.19,
            habitese_m2=8.50,
            habitese_sanitario_m2=1.14,
            habitese_sanitario_vistoria=150,
        ),
    ),
    "sao_jose": City(
        key="sao_jose",
        name="São José",
        factor=1.12,
        taxes=CityTaxes(
            iss=0.02,  # LC 5938/2020
            alvara_base=120,
            alvara_m2=1.85,
            habitese_m2=6.20,
            habitese_minimo=300,
            habitese_sanitario_m2=1.14,
            habitese_sanitario_vistoria=150,
        ),
    ),
    "florianopolis": City(
        key="florianopolis",
        name="Florianópolis",
        factor=1.18,
        taxes=CityTaxes(
            iss=0.03,  # LC 5054/97
            alvara_base=500,  # UFIR-based, averaged
            alvara_m2=3.50,
            habitese_m2=12.00,
            habitese_fixo=500,
            habitese_sanitario_m2=1.14,
            habitese_sanitario_vistoria=200,
        ),
    ),
    "biguacu": City(
        key="biguacu",
        name="Biguaçu",
        factor=1.02,
        taxes=CityTaxes(
            iss=0.025,
            alvara_base=100,
            alvara_m2=1.75,
            habitese_m2=6.50,
            habitese_sanitario_m2=1.14,
            habitese_sanitario_vistoria=150,
        ),
    ),
    "santo_amaro": City(
        key="santo_amaro",
        name="Santo Amaro da Imperatriz",
        factor=1.00,
        taxes=CityTaxes(
            iss=0.02,
            alvara_base=80,
            alvara_m2=1.50,
            habitese_m2=5.00,
            habitese_sanitario_m2=1.14,
            habitese_sanitario_vistoria=130,
        ),
    ),
}
