"""
Tests for the record dataclasses and their column schemas.
"""

import dataclasses

import pytest

from ourairports_json.coercion import Coercion
from ourairports_json.errors import CoercionError, SchemaError
from ourairports_json.models import (
    Airport, AirportFrequency, Country, Navaid, Region, Runway
)

HEATHROW_ROW = [
    '2434', 'EGLL', 'large_airport', 'London Heathrow Airport', '51.4706', '-0.461941', '83',
    'EU', 'GB', 'GB-ENG', 'London', 'yes', 'EGLL', 'LHR', '', 'http://www.heathrowairport.com/',
    'https://en.wikipedia.org/wiki/Heathrow_Airport', 'LON, Londres',
]

RUNWAY_ROW = [
    '232758', '2434', 'EGLL', '12802', '164', 'ASP', '1', '0',
    '09L', '51.4775', '-0.489428', '79', '89.6', '1013',
    '27R', '51.4777', '-0.433258', '78', '269.6', '',
]


class TestSchemaWidths:
    """Each record kind has the column count of its published table."""

    @pytest.mark.parametrize('record_class, arity', [
        (Airport, 18),
        (AirportFrequency, 6),
        (Runway, 20),
        (Navaid, 20),
        (Country, 6),
        (Region, 8),
    ])
    def test_arity(self, record_class, arity):
        assert record_class.schema().arity == arity

    def test_schema_follows_declaration_order(self):
        names = Airport.schema().names
        assert names[:4] == ['id', 'ident', 'type', 'name']
        assert names[-1] == 'keywords'

    def test_schema_is_cached(self):
        assert Runway.schema() is Runway.schema()

    def test_coercions(self):
        coercions = {spec.name: spec.coercion for spec in Runway.schema().fields}
        assert coercions['length_ft'] is Coercion.OPTIONAL_UNSIGNED
        assert coercions['lighted'] is Coercion.BOOLEAN
        assert coercions['le_heading_degT'] is Coercion.OPTIONAL_FLOAT
        assert coercions['he_displaced_threshold_ft'] is Coercion.OPTIONAL_INT
        assert coercions['surface'] is Coercion.TEXT


class TestAirport:
    """Test decoding airport rows."""

    def test_from_row(self):
        airport = Airport.from_row(HEATHROW_ROW)

        assert airport.id == '2434'
        assert airport.ident == 'EGLL'
        assert airport.latitude_deg == 51.4706
        assert airport.longitude_deg == -0.461941
        assert airport.elevation_ft == 83
        assert airport.scheduled_service is True
        assert airport.local_code == ''
        assert airport.keywords == ('LON', 'Londres')

    def test_blank_elevation_is_absent(self):
        row = list(HEATHROW_ROW)
        row[6] = ''
        assert Airport.from_row(row).elevation_ft is None

    def test_bad_latitude_is_fatal(self):
        row = list(HEATHROW_ROW)
        row[4] = ''
        with pytest.raises(CoercionError) as exc_info:
            Airport.from_row(row, row_number=7)
        assert exc_info.value.field == 'latitude_deg'
        assert exc_info.value.row_number == 7

    def test_bad_scheduled_service_names_token(self):
        row = list(HEATHROW_ROW)
        row[11] = 'sometimes'
        with pytest.raises(CoercionError) as exc_info:
            Airport.from_row(row)
        assert exc_info.value.value == 'sometimes'
        assert 'sometimes' in str(exc_info.value)

    def test_wrong_width(self):
        with pytest.raises(SchemaError) as exc_info:
            Airport.from_row(HEATHROW_ROW[:-1], row_number=3)
        error = exc_info.value
        assert error.expected == 18
        assert error.actual == 17
        assert error.row_number == 3
        assert 'expected 18' in str(error)

    def test_records_are_immutable(self):
        airport = Airport.from_row(HEATHROW_ROW)
        with pytest.raises(dataclasses.FrozenInstanceError):
            airport.name = 'Gatwick'

    def test_keywords_cannot_be_mutated(self):
        airport = Airport.from_row(HEATHROW_ROW)
        with pytest.raises(AttributeError):
            airport.keywords.append('MUTATED')
        assert airport.to_dict()['keywords'] == ['LON', 'Londres']

    def test_records_are_hashable(self):
        first = Airport.from_row(HEATHROW_ROW)
        second = Airport.from_row(list(HEATHROW_ROW))
        assert hash(first) == hash(second)
        assert len({first, second}) == 1

    def test_from_dict_keywords_are_a_tuple(self):
        airport = Airport.from_dict(Airport.from_row(HEATHROW_ROW).to_dict())
        assert airport.keywords == ('LON', 'Londres')
        hash(airport)

    def test_text_is_not_trimmed(self):
        row = list(HEATHROW_ROW)
        row[10] = ' London '
        assert Airport.from_row(row).municipality == ' London '


class TestRunway:
    """Test decoding runway rows."""

    def test_from_row(self):
        runway = Runway.from_row(RUNWAY_ROW)

        assert runway.length_ft == 12802
        assert runway.width_ft == 164
        assert runway.lighted is True
        assert runway.closed is False
        assert runway.le_ident == '09L'
        assert runway.le_heading_degT == 89.6
        assert runway.le_displaced_threshold_ft == 1013
        assert runway.he_displaced_threshold_ft is None
        assert str(runway) == 'Runway 09L/27R (LIGHTED) 12802ft'

    def test_missing_ends(self):
        row = ['269408', '4185', 'LFAT', '', '', 'GRS', '0', '1', 'H1'] + [''] * 11
        runway = Runway.from_row(row)

        assert runway.length_ft is None
        assert runway.closed is True
        assert runway.le_latitude_deg is None
        assert runway.he_ident == ''
        assert runway.he_heading_degT is None

    def test_negative_length_is_absent(self):
        row = list(RUNWAY_ROW)
        row[3] = '-1'
        assert Runway.from_row(row).length_ft is None

    def test_bad_lighted_flag(self):
        row = list(RUNWAY_ROW)
        row[6] = 'Y'
        with pytest.raises(CoercionError):
            Runway.from_row(row)


class TestOtherKinds:
    """Test decoding the remaining tables."""

    def test_frequency_stays_text(self):
        frequency = AirportFrequency.from_row(['66105', '4185', 'LFAT', 'AFIS', 'LE TOUQUET Info', '118.325'])
        assert frequency.frequency_mhz == '118.325'

    def test_navaid(self):
        navaid = Navaid.from_row([
            '88016', 'Le_Touquet_NDB_FR', 'LT', 'Le Touquet', 'NDB', '358', '50.5305', '1.59177', '',
            'FR', '', '', '', '', '', '', '0.2', 'TERMINAL', 'LOW', 'LFAT',
        ])
        assert navaid.frequency_khz == '358'
        assert navaid.elevation_ft is None
        assert navaid.dme_latitude_deg is None
        assert navaid.slaved_variation_deg is None
        assert navaid.magnetic_variation_deg == 0.2
        assert navaid.usageType == 'TERMINAL'

    def test_navaid_without_position(self):
        row = ['1', 'X', 'X', 'X', 'NDB', '300', '', '', '', 'FR'] + [''] * 7 + ['', '', '']
        navaid = Navaid.from_row(row)
        assert navaid.latitude_deg is None
        assert navaid.longitude_deg is None

    def test_country_keywords(self):
        country = Country.from_row([
            '302618', 'GB', 'United Kingdom', 'EU',
            'https://en.wikipedia.org/wiki/United_Kingdom', 'Great Britain, British',
        ])
        assert country.keywords == ('Great Britain', 'British')

    def test_region_without_keywords(self):
        region = Region.from_row([
            '303296', 'FR-HDF', 'HDF', 'Hauts-de-France', 'EU', 'FR',
            'https://en.wikipedia.org/wiki/Hauts-de-France', '',
        ])
        assert region.keywords == ()
        assert region.code == 'FR-HDF'


class TestDictConversion:
    """Test to_dict / from_dict."""

    def test_to_dict_order_and_values(self):
        document = Airport.from_row(HEATHROW_ROW).to_dict()

        assert list(document) == Airport.schema().names
        assert document['elevation_ft'] == 83
        assert document['keywords'] == ['LON', 'Londres']

    def test_round_trip(self):
        runway = Runway.from_row(RUNWAY_ROW)
        assert Runway.from_dict(runway.to_dict()) == runway

    def test_from_dict_missing_key(self):
        document = Airport.from_row(HEATHROW_ROW).to_dict()
        del document['keywords']
        with pytest.raises(SchemaError) as exc_info:
            Airport.from_dict(document)
        assert 'missing keywords' in str(exc_info.value)

    def test_from_dict_unexpected_key(self):
        document = Country.from_row(['1', 'GB', 'United Kingdom', 'EU', '', '']).to_dict()
        document['created_at'] = '2024-01-01'
        with pytest.raises(SchemaError) as exc_info:
            Country.from_dict(document)
        assert 'unexpected created_at' in str(exc_info.value)

    def test_from_dict_wrong_type(self):
        document = Airport.from_row(HEATHROW_ROW).to_dict()
        document['scheduled_service'] = 'yes'
        with pytest.raises(CoercionError):
            Airport.from_dict(document)

    def test_from_dict_integer_latitude(self):
        document = Airport.from_row(HEATHROW_ROW).to_dict()
        document['latitude_deg'] = 51
        airport = Airport.from_dict(document)
        assert airport.latitude_deg == 51.0
        assert isinstance(airport.latitude_deg, float)
