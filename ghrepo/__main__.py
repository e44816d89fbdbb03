"""Module entrypoint for `python -m ghrepo`.

Forwards to the same main() as the `ghrepo` console script.
"""

from .cli import main

if __name__ == "__main__":
    main()
