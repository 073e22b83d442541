"""Entry point for `python -m wenyan`."""


def main():
    from wenyan.cli import app
    app(prog_name="wenyan")


if __name__ == "__main__":
    main()
