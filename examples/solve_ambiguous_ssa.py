"""Example: the SSA ambiguous case resolves to the principal-value triangle."""

from triggy import ErrorSet, TriangleSolver, format_errors, solve


def main() -> None:
    triangle = TriangleSolver.from_values(angle_a=35, side_a=7, side_b=10)
    errors = ErrorSet()
    result = solve(triangle, errors)
    print("Success:", result.success, "via", result.strategy)
    for line in triangle.results():
        print(line)
    if errors:
        print(format_errors(errors))

    drawn = triangle.clone()
    drawn.scale(0.5)
    print("Scaled sides:", drawn.sides())


if __name__ == "__main__":
    main()
