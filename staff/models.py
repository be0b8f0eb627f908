# staff/models.py
"""
Database models for the staff application.

This module defines the Staff model. Activities reference the
staff member who created them, so the activities core only needs
to know whether a given staff id exists.
"""

from django.conf import settings
from django.db import models
from django.utils import timezone


class Staff(models.Model):
    """
    Model representing a member of the orphanage staff.

    Attributes
    ----------
    user : OneToOneField
        Optional login account of the staff member.
    full_name : CharField
        Full name of the staff member.
    position : CharField
        Job title (coordinator, educator, caregiver...).
    phone : CharField
        Optional phone number.
    address : TextField
        Optional postal address.
    hire_date : DateField
        Date the staff member was hired.
    """

    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="staff_profile",
    )
    full_name = models.CharField("Full name", max_length=200)
    position = models.CharField("Position", max_length=100)
    phone = models.CharField("Phone", max_length=50, blank=True, null=True)
    address = models.TextField("Address", blank=True, null=True)
    hire_date = models.DateField("Hire date")
    created_at = models.DateTimeField(default=timezone.now)
    updated_at = models.DateTimeField(default=timezone.now)

    class Meta:
        ordering = ["full_name"]
        verbose_name_plural = "staff"

    def __str__(self) -> str:
        return f"{self.full_name} ({self.position})"
