"""Static logo art drawn opaquely at the centre of every frame."""

from __future__ import annotations

from typing import Sequence, Tuple


LOGO_RAW = """
                                    :=+**####%%%%#####**=-
                                  -*##%%%%%%%%%%%%%%%%%%%%%%%%%#*+:
                              -*#%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%#+:
                           =#%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%*:
                        :*%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%+
                      -%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%#
                    =#%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%#:
                  -#%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%*:
                 +%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%-
               :%%%%%%%%%%%%%%%%%%%%%%%%%%%#************#%%%%%%%%%%%%%%%%%%%%%%%%%%%*
              =%%%%%%%%%%%%%%%%%%%%%%%%%%%+              :*%%%%%%%%%%%%%%%%%%%%%%%%%%%:
             *%%%%%%%%%%%%%%%%%%%%%%%%%%%#=               +%%%%%%%%%%%%%%%%%%%%%%%%%%%%-
            +%%%%%%%%%%%%%%%%%%%%%%%%%%%%#-               +%%%%%%%%%%%%%%%%%%%%%%%%%%%%#-
           +%%%%%%%%%%%%%%%%%%%%%%%%%%%%%#-               +%%%%%%%%%%%%%%%%%%%%%%%%%%%%%#-
          =%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%#-               +%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%#:
         :%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%#-               +%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%+
         +%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%#-               +%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%-
        :%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%#-               +%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%#
        *%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%+               +%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%-
        %%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%#+             +%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%*
       -%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%            +%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%
       +%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%-             +%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%:
       *%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%=               +%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%-
       #%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%#-               +%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%=
       *%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%#-               +%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%=
       +%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%#-             :#%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%-
       =%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%#-           :%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%
       :%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%#-            *#%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%#
        #%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%#-              +%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%=
        -%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%#-               +%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%-
         #%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%#-               +%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%=
         -%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%#-               +%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%#
          +%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%#-               +%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%-
          :*%%%%%%%%%%%%%%%%%%%%%%%%%%%%%#-               +%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%=
           :#%%%%%%%%%%%%%%%%%%%%%%%%%%%%#-               +%%%%%%%%%%%%%%%%%%%%%%%%%%%%%+
            :#%%%%%%%%%%%%%%%%%%%%%%%%%%%#-               +%%%%%%%%%%%%%%%%%%%%%%%%%%%%+
             :#%%%%%%%%%%%%%%%%%%%%%%%%%%%=               +%%%%%%%%%%%%%%%%%%%%%%%%%%%+
               +%%%%%%%%%%%%%%%%%%%%%%%%%%#*-:::::::: ::=#%%%%%%%%%%%%%%%%%%%%%%%%%%%-
                -%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%*
                 :+%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%=
                   :#%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%+
                     :#%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%+
                        *%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%=
                          =#%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%*:
                             -#%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%*:
                                 =#%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%#*-
                                     :=*##%%%%%%%%%%%%%%%%###+-
                                             ::-------:
"""


def prepare_logo(lines: Sequence[str]) -> Tuple[str, ...]:
    """Normalise raw art lines into a block of equal width.

    The first line is trimmed and re-centred across the block width (stripping
    the surrounding text removes its original indentation); every other line
    is right-padded with blanks.
    """

    if not lines:
        return ()
    width = max(len(line) for line in lines)
    prepared = []
    for index, line in enumerate(lines):
        if index == 0:
            trimmed = line.strip()
            pad = (width - len(trimmed)) // 2
            prepared.append(" " * pad + trimmed + " " * (width - pad - len(trimmed)))
        else:
            prepared.append(line.ljust(width))
    return tuple(prepared)


def split_art(raw: str) -> list[str]:
    """Split multi-line art, dropping the surrounding blank space."""

    return raw.strip().split("\n")


LOGO_LINES: Tuple[str, ...] = prepare_logo(split_art(LOGO_RAW))


__all__ = ["LOGO_LINES", "LOGO_RAW", "prepare_logo", "split_art"]
