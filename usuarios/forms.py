from django import forms
from django.core.exceptions import ValidationError

from roles.models import Role
from .models import CustomUser


class UsuarioForm(forms.ModelForm):
    """Alta de usuarios del back office por parte de un administrador."""
    first_name = forms.CharField(max_length=30, required=True, label="Nombre")
    last_name  = forms.CharField(max_length=30, required=True, label="Apellido")
    email      = forms.EmailField(required=True, label="Email")
    password   = forms.CharField(widget=forms.PasswordInput, required=True, label="Contraseña")
    roles      = forms.ModelMultipleChoiceField(
        queryset=Role.objects.all(), required=False,
        widget=forms.CheckboxSelectMultiple, label="Roles",
    )

    class Meta:
        model  = CustomUser
        fields = ("first_name", "last_name", "email", "password", "roles")

    def clean_email(self):
        email = (self.cleaned_data.get("email") or "").strip().lower()
        if CustomUser.objects.filter(email__iexact=email).exists():
            raise ValidationError("Ya existe una cuenta con este email.")
        return email

    def save(self, commit=True):
        user = super().save(commit=False)
        user.email      = self.cleaned_data["email"]  # ya normalizado
        user.first_name = self.cleaned_data["first_name"].strip()
        user.last_name  = self.cleaned_data["last_name"].strip()
        user.set_password(self.cleaned_data["password"])
        if commit:
            user.save()
            self.save_m2m()
        return user
