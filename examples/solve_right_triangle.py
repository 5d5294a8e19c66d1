"""Example pipeline: solve a 3-4-5 triangle from its three sides."""

from triggy import solve_values


def main() -> None:
    triangle, result = solve_values(side_a=3, side_b=4, side_c=5)
    print("Success:", result.success)
    print("Strategy:", result.strategy.value if result.strategy else None)
    for line in triangle.results():
        print(line)
    print("Auxiliary triangle:", triangle.alt_triangle)


if __name__ == "__main__":
    main()
