import pytest


def _banner(title: str):
    print("\n" + "=" * 12 + f" {title} " + "=" * 12)


print("\n[DEBUG] Starting core import and constants baseline tests...")

# Stage 1: import self-check
def test_sanity_imports():
    """Verify that core submodules import without circular errors."""
    from scaled_decimal.core import (
        ScaledDecimal,
        RoundingMode,
        round_div,
        stringify,
        stringify_locale,
        HostNumberFormatter,
        EXP_MIN,
        EXP_MAX,
        DEFAULT_ROUNDING,
    )

    _banner("SANITY: imports")
    print("[DEBUG] Successfully imported all core symbols.")
    assert isinstance(EXP_MAX, int) and isinstance(EXP_MIN, int)
    assert callable(round_div) and callable(stringify) and callable(stringify_locale)
    assert DEFAULT_ROUNDING in RoundingMode
    assert hasattr(ScaledDecimal, "coef") or hasattr(ScaledDecimal, "__dataclass_fields__")
    assert hasattr(HostNumberFormatter, "format_to_parts")


def test_top_level_package_reexports_core():
    import scaled_decimal
    from scaled_decimal import core

    _banner("SANITY: top-level exports")
    print(f"[DEBUG] scaled_decimal {scaled_decimal.__version__}")
    for name in scaled_decimal.__all__:
        if name == "__version__":
            continue
        assert getattr(scaled_decimal, name) is getattr(core, name), name
    for name in core.__all__:
        assert hasattr(core, name), name
    assert "fmt_dec" not in core.__all__
    assert scaled_decimal.__doc__.strip().startswith("Top-level API for scaled_decimal.")


# Stage 2: constants baseline tests
def test_sanity_constants_alignment():
    """Exponent bounds, default mode and template constants."""
    from scaled_decimal.core import EXP_MIN, EXP_MAX, DEFAULT_ROUNDING, RoundingMode
    from scaled_decimal.core.constants import (
        TEMPLATE_INT_MODULUS,
        TEMPLATE_INT_BUMP,
        TEMPLATE_FRAC_MODULUS,
        TEMPLATE_FRAC_BUMP,
        TEMPLATE_FRAC_DIGITS,
    )

    _banner("SANITY: constants baseline")
    print(f"[DEBUG] EXP_RANGE=({EXP_MIN},{EXP_MAX}), DEFAULT_ROUNDING={DEFAULT_ROUNDING.name}")

    assert EXP_MAX == 2 ** 53 - 1 == 9_007_199_254_740_991
    assert EXP_MIN == -EXP_MAX
    assert DEFAULT_ROUNDING is RoundingMode.HALF_UP

    # Derived checks: the template stays well inside double precision
    assert TEMPLATE_INT_MODULUS * TEMPLATE_FRAC_MODULUS < 2 ** 53
    assert TEMPLATE_INT_BUMP * 10 == TEMPLATE_INT_MODULUS
    assert TEMPLATE_FRAC_BUMP * 10 == TEMPLATE_FRAC_MODULUS
    assert 10 ** TEMPLATE_FRAC_DIGITS == TEMPLATE_FRAC_MODULUS


# Stage 3: exception hierarchy
@pytest.mark.parametrize(
    "name,bases",
    [
        ("DecimalSyntaxError", ("ScaledDecimalError", ValueError)),
        ("DecimalTypeError", ("ScaledDecimalError", TypeError)),
        ("DecimalRangeError", ("ScaledDecimalError", ValueError)),
        ("DivisionByZero", ("DecimalRangeError", ZeroDivisionError)),
        ("DoubleRoundingError", ("DecimalRangeError",)),
        ("InexactRescaleError", ("DecimalRangeError",)),
    ],
)
def test_exception_hierarchy(name, bases):
    from scaled_decimal.core import exc

    _banner(f"EXCEPTIONS: {name}")
    cls = getattr(exc, name)
    for base in bases:
        base_cls = getattr(exc, base) if isinstance(base, str) else base
        print(f"[DEBUG] {name} subclass of {base_cls.__name__}? {issubclass(cls, base_cls)}")
        assert issubclass(cls, base_cls)


def test_exception_payloads():
    from scaled_decimal.core import DoubleRoundingError, InexactRescaleError

    _banner("EXCEPTIONS: payloads")
    e = DoubleRoundingError(2, 0, 1)
    assert (e.exp_out, e.dividend_exp, e.divisor_exp) == (2, 0, 1)
    r = InexactRescaleError(125, -1, 0)
    assert (r.coef, r.from_exp, r.to_exp) == (125, -1, 0)
    print(f"[DEBUG] {e} | {r}")


# Stage 4: debug gates default to off
def test_debug_flags_default_off():
    from scaled_decimal.core import host, localefmt, rounding, scaled

    _banner("SANITY: debug flags")
    assert host.DEBUG_HOST is False
    assert localefmt.DEBUG_LOCALE is False
    assert rounding.DEBUG_ROUNDING is False
    assert scaled.DEBUG_NUMBERS is False


def test_debug_output_when_enabled(capsys, monkeypatch):
    from scaled_decimal.core import ScaledDecimal, scaled

    monkeypatch.setattr(scaled, "DEBUG_NUMBERS", True)
    ScaledDecimal(1, 0).divide(ScaledDecimal(3, 0), -2)
    out = capsys.readouterr().out
    assert "divide: m=100, yc=3" in out
