import sys


def main():
    try:
        from .cli import run_cli
        sys.exit(run_cli())
    except KeyboardInterrupt:
        sys.exit(255)


if __name__ == "__main__":
    main()
