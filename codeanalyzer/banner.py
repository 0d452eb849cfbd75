import os
import random
import sys

from colorama import Fore, Style

from codeanalyzer.utils.settings import ENV_DISABLE_COLORS


def get_ascii_art(color: bool = True) -> str:
    """
    Return a randomly chosen ASCII-art banner, line-colored unless `color` is False.
    """
    banner1 = r"""
   ______          __      ___                __
  / ____/___  ____/ /__   /   |  ____  ____ _/ /_  ______  ___  _____
 / /   / __ \/ __  / _ \ / /| | / __ \/ __ `/ / / / /_  / / _ \/ ___/
/ /___/ /_/ / /_/ /  __// ___ |/ / / / /_/ / / /_/ / / /_/  __/ /
\____/\____/\__,_/\___//_/  |_/_/ /_/\__,_/_/\__, / /___/\___/_/
                                            /____/

 Long methods, magic numbers, naming conventions and dead code in C# sources
"""

    banner2 = r"""
  ___  __  ____  ____     __   __ _   __   __    _  _  ____  ____  ____
 / __)/  \(    \(  __)   / _\ (  ( \ / _\ (  )  ( \/ )(__  )(  __)(  _ \
( (__(  O )) D ( ) _)   /    \/    //    \/ (_/\ )  /  / _/  ) _)  )   /
 \___)\__/(____/(____)  \_/\_/\_)__)\_/\_/\____/(__/  (____)(____)(__\_)

 Long methods, magic numbers, naming conventions and dead code in C# sources
"""

    art = random.choice([banner1, banner2])
    if not color:
        return art

    color_choices = [Fore.RED, Fore.GREEN, Fore.BLUE]
    art_with_color = ""
    for line in art.split("\n"):
        art_with_color += random.choice(color_choices) + line + "\n"
    art_with_color += Style.RESET_ALL
    return art_with_color


def colors_enabled(stream=None) -> bool:
    """
    Colors are used on a terminal unless CODEANALYZER_NO_COLOR is set.
    """
    stream = stream or sys.stderr
    if os.environ.get(ENV_DISABLE_COLORS):
        return False
    return hasattr(stream, "isatty") and stream.isatty()


def print_banner(stream=None) -> None:
    """
    Print the ASCII-art banner to stderr so it never mixes with a report on stdout.
    """
    stream = stream or sys.stderr
    print(get_ascii_art(color=colors_enabled(stream)), file=stream)
