from coreswitch._steps.init import init
from coreswitch._steps.show import Overview, show
from coreswitch._steps.switch import pick_version, switch

__all__ = ("init", "show", "Overview", "pick_version", "switch")
