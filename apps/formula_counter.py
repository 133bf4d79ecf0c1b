# /// script
# requires-python = ">=3.10"
# dependencies = [
#     "chemformula",
#     "marimo",
#     "polars",
# ]
# ///
"""
Interactive element counter for chemical formulas, including hydrates.
"""

import marimo

__generated_with = "0.18.1"
app = marimo.App(
    width="medium",
    app_title="Chemical formula element counter",
)

with app.setup:
    import marimo as mo
    import polars as pl

    from chemformula import FormulaError, atomic_number, parse_formula


@app.function
def counts_frame(counts):
    rows = sorted(counts.items(), key=lambda item: atomic_number(item[0]))
    return pl.DataFrame(
        {
            "element": [symbol for symbol, _ in rows],
            "count": [count for _, count in rows],
        },
        schema={"element": pl.Utf8, "count": pl.Int64},
    )


@app.cell
def intro():
    mo.md("""
    # Element counter

    Enter a formula such as `Al2(SO4)3·18H2O`. Hydrate separators may be
    written `·`, `.`, `•`, `⋅`, `∙` or `・`.
    """)
    return


@app.cell
def formula_input():
    formula = mo.ui.text(value="CuSO4·5H2O", label="Formula", full_width=True)
    formula
    return (formula,)


@app.cell
def result_view(formula):
    try:
        counts = parse_formula(formula.value)
        view = mo.ui.table(counts_frame(counts), selection=None)
    except FormulaError as e:
        view = mo.md(f"🚫 **{type(e).__name__}**: {e}")
    view
    return


if __name__ == "__main__":
    app.run()
