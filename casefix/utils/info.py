"""
Package information utility.

This module provides a command-line utility for displaying
information about the casefix installation and active configuration.
"""

import sys
import platform
from typing import Dict, Any

import yaml

import casefix


def get_system_info() -> Dict[str, Any]:
    """
    Get system information relevant to casefix.

    Returns:
        Dictionary containing system information
    """
    info = {
        'python_version': sys.version,
        'platform': platform.platform(),
        'architecture': platform.architecture(),
        'yaml_version': getattr(yaml, '__version__', 'unknown'),
    }
    return info


def get_casefix_info() -> Dict[str, Any]:
    """
    Get casefix-specific information.

    Returns:
        Dictionary containing version and effective configuration
    """
    info = {
        'version': casefix.__version__,
        'author': casefix.__author__,
    }

    try:
        config = casefix.get_config()
        info['config_file'] = str(config.config_file)
        info['config_file_exists'] = config.config_file.exists()
        info['strategy'] = config.policy.strategy
        info['retain_digits'] = config.policy.retain_digits
        info['sentinels'] = dict(vars(config.sentinels))
    except casefix.CasefixError as e:
        info['config_error'] = str(e)

    return info


def print_info() -> None:
    """Print formatted information about casefix and the system."""
    print("casefix Identifier Naming Tool")
    print("=" * 40)

    casefix_info = get_casefix_info()
    print(f"\ncasefix Version: {casefix_info['version']}")
    print(f"Author: {casefix_info['author']}")

    if 'config_error' in casefix_info:
        print(f"Configuration Error: {casefix_info['config_error']}")
    else:
        source = casefix_info['config_file'] if casefix_info['config_file_exists'] else "defaults"
        print(f"Configuration: {source}")
        print(f"Strategy: {casefix_info['strategy']}")
        print(f"Retain Digits: {casefix_info['retain_digits']}")
        for key, value in casefix_info['sentinels'].items():
            print(f"Sentinel {key}: {value}")

    system_info = get_system_info()
    print(f"\nPython Version: {system_info['python_version'].split()[0]}")
    print(f"Platform: {system_info['platform']}")
    print(f"Architecture: {system_info['architecture'][0]}")
    print(f"PyYAML Version: {system_info['yaml_version']}")


def main() -> None:
    """Main entry point for the casefix-info command."""
    try:
        print_info()
    except Exception as e:
        print(f"Error getting system information: {e}")
        sys.exit(1)


if __name__ == '__main__':
    main()
