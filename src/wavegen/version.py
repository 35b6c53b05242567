"""
wavegen - Version Metadata
License: GPL-3.0-or-later
"""

__version__ = "1.0"
__license__ = "GPL-3.0-or-later"
__build_date__ = "2026-10-18"

def get_version():
    """Get the current version string"""
    return __version__

def get_version_info():
    """Get detailed version information"""
    return {
        'version': __version__,
        'license': __license__,
        'build_date': __build_date__,
    }
