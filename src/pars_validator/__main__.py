from .cli import app


def main() -> None:
    app(prog_name="pars-validator")


if __name__ == "__main__":
    main()
