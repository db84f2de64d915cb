from datetime import date

import datecodes
from datecodes import Country


def test_public_surface():
    for name in datecodes.__all__:
        assert hasattr(datecodes, name)


def test_generate_and_parse_1990s_code():
    code = datecodes.generate_1990s_code_from_date("th", date(1990, 1, 15))
    assert code == "TH0910"

    decoded = datecodes.parse_1990s_code(code)
    assert decoded.year == 1990
    assert decoded.month == 1
    assert decoded.location_code == "TH"
    assert decoded.countries == (Country.FRANCE,)


def test_errors_are_value_errors():
    assert issubclass(datecodes.DateCodeError, ValueError)
    for cls in (
        datecodes.MissingArgumentError,
        datecodes.DateCodeRangeError,
        datecodes.InvalidFormatError,
    ):
        assert issubclass(cls, datecodes.DateCodeError)
