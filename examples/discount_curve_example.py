"""Interpolate a discount-factor curve keyed on calendar dates."""

from datetime import date

from qinterp import OutsideOfRangeError, configure_logging, make_interpolator

configure_logging("DEBUG")

pillars = [date(1990, 6, 16), date(1990, 7, 17), date(1990, 9, 17), date(1990, 12, 17)]
discount_factors = [0.9870, 0.9753, 0.9511, 0.9152]

linear = make_interpolator("linear", pillars, discount_factors)
poly = make_interpolator("barycentric", pillars, discount_factors)
poly.fit()

for query in [date(1990, 6, 20), date(1990, 8, 1), date(1990, 11, 1)]:
    print(f"{query}: linear={linear(query):.6f} barycentric={poly(query):.6f}")

poly.add_point(date(1990, 8, 16), 0.9633)
print(f"after add_point, fitted={poly.is_fitted}")
print(f"1990-08-01: barycentric={poly(date(1990, 8, 1)):.6f}")

try:
    linear(date(1991, 1, 1))
except OutsideOfRangeError as exc:
    print(f"out of range: {exc}")
