# children/models.py
"""
Database models for the children application.

This module defines the Child model, which represents
a child cared for by the orphanage.
"""

from django.conf import settings
from django.db import models
from django.utils import timezone


class Child(models.Model):
    """
    Model representing a child.

    Attributes
    ----------
    user : OneToOneField
        Optional login account used by the child dashboard.
    full_name : CharField
        The child's full name.
    date_of_birth : DateField
        The child's date of birth.
    gender : CharField
        One of the ``Gender`` choices.
    admission_date : DateField
        Date the child was admitted to the orphanage.
    health_status : TextField
        Optional free-text health notes.
    education_level : CharField
        Optional current education level.
    photo_url : URLField
        Optional link to a photo.
    background_story : TextField
        Optional background notes.
    """

    class Gender(models.TextChoices):
        """
        Enumeration of genders recorded for a child.
        """

        MALE = "MALE", "Male"
        FEMALE = "FEMALE", "Female"

    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="child_profile",
    )
    full_name = models.CharField("Full name", max_length=200)
    date_of_birth = models.DateField("Date of birth")
    gender = models.CharField("Gender", max_length=16, choices=Gender.choices)
    admission_date = models.DateField("Admission date")
    health_status = models.TextField("Health status", blank=True, null=True)
    education_level = models.CharField(
        "Education level", max_length=100, blank=True, null=True
    )
    photo_url = models.URLField("Photo URL", blank=True, null=True)
    background_story = models.TextField("Background story", blank=True, null=True)
    created_at = models.DateTimeField(default=timezone.now)
    updated_at = models.DateTimeField(default=timezone.now)

    class Meta:
        """
        Metadata for the Child model.

        Attributes
        ----------
        ordering : list
            Default ordering by full name.
        """

        ordering = ["full_name"]

    def __str__(self) -> str:
        """
        Return a string representation of the child.

        Returns
        -------
        str
            Full name of the child.
        """
        return self.full_name
