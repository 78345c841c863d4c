import sys
import os
import appdirs

import whenpresent.wrappedos

APPNAME = "when-present"
CONFIG_FILENAME = APPNAME + ".conf"


def extract_value_from_argv(key, argv=None, default=None):
    """Extract the value for the given key from the argv.
    Return the given default if no key was identified
    """
    if argv is None:
        argv = sys.argv

    value = default

    hyphens = ("-", "--")
    for hh in hyphens:
        for index, arg in enumerate(argv):
            keywithhyphens = "".join([hh, key, "="])
            if arg.startswith(keywithhyphens):
                value = arg.split("=", 1)[1]
            elif arg == "".join([hh, key]) and index + 1 < len(argv):
                value = argv[index + 1]

    return value


def extractconfig(argv):
    config = extract_value_from_argv(key="config", argv=argv, default=None)
    if not config:
        config = extract_value_from_argv(key="c", argv=argv, default=None)
    return config


def default_config_directories(user_config_dir=None, system_config_dir=None, verbose=0):
    # Use configuration in the order (lowest to highest priority)
    # 1) system config (XDG compliant.  /etc/xdg/when-present)
    # 2) user config   (XDG compliant. ~/.config/when-present)
    # 3) current working directory
    # 4) environment variables
    # 5) given on the command line

    # These variables are settable to assist writing tests
    if user_config_dir is None:
        user_config_dir = appdirs.user_config_dir(appname=APPNAME)
    if system_config_dir is None:
        system_config_dir = appdirs.site_config_dir(appname=APPNAME)

    results = []
    for directory in (system_config_dir, user_config_dir, os.getcwd()):
        if directory not in results:
            results.append(directory)

    if verbose >= 9:
        print(" ".join(["Default config directories"] + results))
    return results


def defaultconfigs(user_config_dir=None, system_config_dir=None, verbose=0):
    """Find the when-present.conf files, lowest priority first"""
    candidates = [
        os.path.join(defaultdir, CONFIG_FILENAME)
        for defaultdir in default_config_directories(
            user_config_dir=user_config_dir,
            system_config_dir=system_config_dir,
            verbose=verbose,
        )
    ]

    # Only return the configs that exist
    configs = [cfg for cfg in candidates if whenpresent.wrappedos.isfile(cfg)]
    if verbose >= 8:
        print(" ".join(["Default configs are "] + configs))
    return configs



def config_files(argv=None, user_config_dir=None, system_config_dir=None, verbose=0):
    """The default config files plus any config given directly with -c/--config"""
    configs = defaultconfigs(
        user_config_dir=user_config_dir,
        system_config_dir=system_config_dir,
        verbose=verbose,
    )

    argvconfig = extractconfig(argv)
    if argvconfig:
        if not whenpresent.wrappedos.isfile(argvconfig):
            sys.stderr.write(
                " ".join(["Could not find the config file =", argvconfig, "\n"])
            )
            sys.exit(1)
        configs.append(argvconfig)

    if verbose >= 1:
        print("Using config files = ")
        print(configs)
    return configs
