import sys
import inspect
import argparse


def _infer_argument(param, manual_arg_defaults, manual_arg_types):
    """
    Work out (required, type, default) for one function parameter.

    Types come from the signature default unless overridden. A manual type
    wins over anything inferred.
    """

    name = param.name

    if name in manual_arg_defaults:
        default = manual_arg_defaults[name]
        arg_type = type(default)
        required = False
    elif param.default is not param.empty:
        default = param.default
        arg_type = type(default)
        required = False
    else:
        default = None
        arg_type = None
        required = True

    if name in manual_arg_types:
        arg_type = manual_arg_types[name]

    return required, arg_type, default


def build_parser(fcn,
                 manual_arg_defaults=None,
                 manual_arg_types=None,
                 manual_arg_nargs=None,
                 prog=None):
    """
    Build an argparse parser from the signature and docstring of `fcn`.

    Parameters without a default become positional arguments. Parameters
    with a default become ``--name`` options; bool defaults become flags
    that flip the default.

    Parameters
    ----------
    fcn : callable
        function whose signature defines the command line.
    manual_arg_defaults : dict, optional
        parameter name to default, overriding the signature. The argument
        type is set to the type of the value.
    manual_arg_types : dict, optional
        parameter name to type. Overrides any inferred type.
    manual_arg_nargs : dict, optional
        parameter name to argparse nargs.
    prog : str, optional
        program name shown in usage. Defaults to the function name.

    Returns
    -------
    argparse.ArgumentParser
    """

    manual_arg_defaults = manual_arg_defaults or {}
    manual_arg_types = manual_arg_types or {}
    manual_arg_nargs = manual_arg_nargs or {}

    parser = argparse.ArgumentParser(prog=prog or fcn.__name__,
                                     description=inspect.getdoc(fcn),
                                     formatter_class=argparse.RawTextHelpFormatter)

    for name, param in inspect.signature(fcn).parameters.items():

        required, arg_type, default = _infer_argument(param,
                                                      manual_arg_defaults,
                                                      manual_arg_types)
        nargs = manual_arg_nargs.get(name)

        if required:
            parser.add_argument(name, type=arg_type, nargs=nargs)
        elif arg_type is bool:
            action = "store_false" if default is True else "store_true"
            parser.add_argument(f"--{name}", action=action)
        else:
            parser.add_argument(f"--{name}", type=arg_type,
                                default=default, nargs=nargs)

    return parser


def generalized_main(fcn,
                     argv=None,
                     manual_arg_defaults=None,
                     manual_arg_types=None,
                     manual_arg_nargs=None,
                     prog=None):
    """
    Parse command line arguments against the signature of `fcn`, call it,
    and return whatever it returns.

    Parameters
    ----------
    fcn : callable
        function to run.
    argv : iterable, optional
        arguments to parse. If None, use sys.argv[1:].
    manual_arg_defaults, manual_arg_types, manual_arg_nargs, prog
        passed to `build_parser`.
    """

    if argv is None:
        argv = sys.argv[1:]

    parser = build_parser(fcn,
                          manual_arg_defaults=manual_arg_defaults,
                          manual_arg_types=manual_arg_types,
                          manual_arg_nargs=manual_arg_nargs,
                          prog=prog)
    args = parser.parse_args(argv)

    return fcn(**vars(args))
