"""The Command Line Interface for the utility, including Interactive elements.

A hybrid CLI/ICLI (Command Line Interface/Interactive Command Line Interface) that prompts on-the-fly for whatever
the command line left out, unless told to stay non-interactive.

Typical usage example:

    binxgcd compute --a 48 --b 18
    OR
    python -m binxgcd verify --a 48 --b 18 --triple triple.pem
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import argparse
import pathlib
import sys
import typing

import binxgcd


class HelpData(typing.NamedTuple):
    description: str
    format: typing.Type = str
    choices: list[str] | None = None
    default: typing.Any = None
    advanced: bool = False


help_dict: dict[str, HelpData] = {
    "subcommand":
        HelpData(
            description="The available subcommands in binxgcd.",
            choices=["compute", "verify"],
        ),
    "compute":
        HelpData("Compute the GCD and Bezout coefficients."),
    "verify":
        HelpData("Verify a stored Bezout triple."),
    "a":
        HelpData(
            description="The first integer.",
            format=int,
        ),
    "b":
        HelpData(
            description="The second integer.",
            format=int,
        ),
    "output":
        HelpData(
            description="File to export the resulting triple to, PEM encoded.",
            format=pathlib.Path,
        ),
    "der":
        HelpData(
            description="Print the triple as base64 DER instead of plain numbers?",
            choices=["Y", "N"],
            default="N",
            advanced=True,
        ),
    "triple":
        HelpData(
            description="Location of the PEM encoded triple file.",
            format=pathlib.Path,
        ),
}

needs = {
    "compute": ("a", "b", "der"),
    "verify": ("a", "b", "triple"),
}

operands = argparse.ArgumentParser(add_help=False)
operands.add_argument("--a", "-a", type=help_dict["a"].format, help=help_dict["a"].description)
operands.add_argument("--b", "-b", type=help_dict["b"].format, help=help_dict["b"].description)
corep = argparse.ArgumentParser(prog="binxgcd")
corep.add_argument("--version", "-v", action="version", version=f"%(prog)s {binxgcd.__version__}")
corep.add_argument("--non-interactive", "-n", action="store_true", help="Enable non-interactive mode")
corep.add_argument("--advanced", action="store_true", help="Enable advanced mode, for interactive mode")
commands = corep.add_subparsers(dest="subcommand", title="Subcommands")

compute = commands.add_parser("compute", parents=[operands], help=help_dict["compute"].description)
compute.add_argument("--output", "-o", type=help_dict["output"].format, help=help_dict["output"].description)
compute.add_argument("--der", "-d", action="store_const", const="Y", help=help_dict["der"].description)

verify = commands.add_parser("verify", parents=[operands], help=help_dict["verify"].description)
verify.add_argument("--triple", "-t", type=help_dict["triple"].format, help=help_dict["triple"].description)


def checkmodes(arg: str, mode: tuple[bool, bool]):
    helper_data = help_dict[arg]
    if (mode[0] or (helper_data.advanced and not mode[1])) and helper_data.default:
        return helper_data.default
    if mode[0]:
        raise IOError(f"Argument {arg} is missing and non-interactive mode is active.")
    return helper_data


def choice_handler(arg: str, mode: tuple[bool, bool], prntr: typing.Callable = print):
    helper_data = checkmodes(arg, mode)
    if not isinstance(helper_data, HelpData):
        return helper_data
    prntr(f"Please specify the {arg}!")
    prntr("Description: " + helper_data.description)
    choices = helper_data.choices
    vald = set(choices)
    for choice in choices:
        defstring = " (Default)" if choice == helper_data.default else ""
        if help_dict.get(choice, None):
            prntr(f"{choice} - {help_dict[choice].description}" + defstring)
        else:
            prntr(f"{choice}" + defstring)
    if helper_data.default is not None:
        prntr("To accept default just click enter. Otherwise specify value.")
    while True:
        ch = input(f"{arg}: ")
        if ch in vald:
            return ch
        if not ch and helper_data.default is not None:
            return helper_data.default
        prntr("Please select an option from the list.")


def input_handler(arg: str, mode: tuple[bool, bool], prntr: typing.Callable = print):
    helper_data = checkmodes(arg, mode)
    if not isinstance(helper_data, HelpData):
        return helper_data
    prntr(f"Please specify the {arg}!")
    prntr("Description: " + helper_data.description)
    if helper_data.default is not None:
        prntr(f"Default value: {helper_data.default}")
        prntr("To accept default just click enter. Otherwise specify value.")
    cls = helper_data.format
    while True:
        ch = input(f"{arg}: ")
        if not ch and helper_data.default is not None:
            return helper_data.default
        if ch == "":
            prntr("Please provide a value.")
            continue
        try:
            return cls(ch)
        except ValueError:
            prntr(f"We could not convert your value to {cls.__name__}.")


def main(argv: list[str] | None = None):
    """Core Hybrid CLI/ICLI (Command Line Interface/Interactive Command Line Interface)"""
    args = corep.parse_args(argv)
    pstatus = (args.non_interactive, args.advanced)

    def pspr(text: str):
        """Print only if not in non-interactive mode."""
        if not pstatus[0]:
            print(text)

    pspr("Welcome to binxgcd!\n")
    if not args.subcommand:
        args.subcommand = choice_handler("subcommand", pstatus)
    for reqs in needs[args.subcommand]:
        if getattr(args, reqs, None) is None:
            if help_dict[reqs].choices is not None:
                res = choice_handler(reqs, pstatus)
            else:
                res = input_handler(reqs, pstatus)
            setattr(args, reqs, res)
        else:
            pspr(f"{reqs}: {getattr(args, reqs)}")
    pspr("\nInput Complete! Executing...")
    match args.subcommand:
        case "compute":
            res = binxgcd.extended_gcd(args.a, args.b)
            output = getattr(args, "output", None)
            if output is not None:
                binxgcd.export_triple(output, res)
                pspr(f"Triple exported to {output}.")
            pspr("Result (gcd x y):")
            if args.der == "Y":
                print(binxgcd.encode_triple(res).decode("ascii"))
            else:
                print(f"{res.gcd} {res.x} {res.y}")
        case "verify":
            triple = binxgcd.import_triple(args.triple)
            if binxgcd.is_bezout(args.a, args.b, triple):
                pspr("Triple Verified!")
            else:
                print("Triple Verification Failed!")
                sys.exit(1)
    pspr("Thank you for using binxgcd!")
    pspr("Goodbye!")


if __name__ == "__main__":
    main()
