from .registry_base import NameRegistry
from .registry_manager import DescriptorRegistry, FormRegistry, RegistryManager

__all__ = ["NameRegistry", "DescriptorRegistry", "FormRegistry", "RegistryManager"]
