"""
Entity catalog.

Describes the five inventory entity kinds that credentials and notes can be
attached to, and the ``Association`` value that points at one entity row.
Entity ids are unique within a kind only, so an association always carries
both halves.
"""

from dataclasses import dataclass

from django.apps import apps
from django.db import models

from infradesk.vault.errors import ValidationError


class EntityKind(models.TextChoices):
    VMWARE_SERVER = 'vmware_server', 'VMware Server'
    VIRTUAL_APPLIANCE = 'virtual_appliance', 'Virtual Appliance'
    APPLICATION = 'application', 'Application'
    CONTAINER = 'container', 'Container'
    URL = 'url', 'URL'


# Entity kind -> model label
ENTITY_MODELS = {
    EntityKind.VMWARE_SERVER: 'inventory.VMwareServer',
    EntityKind.VIRTUAL_APPLIANCE: 'inventory.VirtualAppliance',
    EntityKind.APPLICATION: 'inventory.Application',
    EntityKind.CONTAINER: 'inventory.Container',
    EntityKind.URL: 'inventory.AppUrl',
}


def entity_model(kind):
    """Return the model class for an entity kind."""
    return apps.get_model(ENTITY_MODELS[EntityKind(kind)])


@dataclass(frozen=True)
class Association:
    """The (entity kind, entity id) pair a credential or note belongs to."""

    kind: EntityKind
    entity_id: int

    @classmethod
    def parse(cls, kind, entity_id):
        """
        Build an association from untrusted input (URL kwargs, JSON bodies).
        Raises ValidationError for unknown kinds or non-positive ids.
        """
        try:
            kind = EntityKind(kind)
        except ValueError:
            raise ValidationError({'associated_type': f'Unknown entity kind "{kind}".'})
        try:
            entity_id = int(entity_id)
        except (TypeError, ValueError):
            raise ValidationError({'associated_id': f'"{entity_id}" is not a valid entity id.'})
        if entity_id < 1:
            raise ValidationError({'associated_id': 'Entity id must be a positive integer.'})
        return cls(kind, entity_id)

    def __str__(self):
        return f"{self.kind.label} #{self.entity_id}"

    @property
    def slug(self):
        """Stable string key, used for session storage."""
        return f"{self.kind.value}:{self.entity_id}"

    def as_filter(self):
        """Keyword arguments selecting rows attached to this association."""
        return {'associated_type': self.kind.value, 'associated_id': self.entity_id}

    def resolve(self):
        """Return the referenced entity row, or None if it does not exist."""
        return entity_model(self.kind).objects.filter(pk=self.entity_id).first()
