from bindwire.contracts import ViewBinding


class ProfileBinding(ViewBinding):
    pass


class SettingsBinding(ViewBinding):
    pass


class MainBinding(ViewBinding):
    pass


class ExtendedProfileBinding(ProfileBinding):
    """Implements ``ViewBinding`` only through its parent."""
