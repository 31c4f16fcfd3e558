
class ProfileBrowserError(Exception):
    """Base exception for all profile_browser errors"""
    pass

class ConfigError(ProfileBrowserError):
    """Invalid or inconsistent global.json"""
    pass

class ProfileSchemaError(ProfileBrowserError):
    """
    Profile table doesn't match what the views expect
    missing geneID/ncbiID columns, unreadable file, etc
    """
    pass

class MissingDependencyError(ProfileBrowserError):
    """Required distributions are not installed in the environment"""

    def __init__(self, missing: list[str]):
        self.missing = missing
        super().__init__(f"Missing required packages: {', '.join(missing)}")
