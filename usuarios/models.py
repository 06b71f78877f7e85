from django.contrib.auth.models import AbstractBaseUser, BaseUserManager, PermissionsMixin
from django.db import models
from django.utils import timezone

from roles.models import NombreRol, Role


class CustomUserManager(BaseUserManager):
    def create_user(self, email, password=None, **extra_fields):
        if not email:
            raise ValueError('The Email field must be set')
        email = self.normalize_email(email)

        extra_fields.setdefault('is_staff', False)
        extra_fields.setdefault('is_superuser', False)

        user = self.model(email=email, **extra_fields)
        user.set_password(password)
        user.save(using=self._db)
        return user

    def create_superuser(self, email, password=None, **extra_fields):
        extra_fields.setdefault('is_staff', True)
        extra_fields.setdefault('is_superuser', True)
        return self.create_user(email, password, **extra_fields)


class CustomUser(AbstractBaseUser, PermissionsMixin):

    class Tema(models.TextChoices):
        CLARO = "claro", "Claro"
        OSCURO = "oscuro", "Oscuro"

    email = models.EmailField(unique=True)
    first_name = models.CharField(max_length=30)
    last_name = models.CharField(max_length=30)
    is_active = models.BooleanField(default=True)
    is_staff = models.BooleanField(default=False)
    date_joined = models.DateTimeField(default=timezone.now)

    # preferencia de interfaz, se lee en el context processor del tema
    tema = models.CharField(max_length=10, choices=Tema.choices, default=Tema.CLARO)

    # relaciona customUser con Role (N:M)
    roles = models.ManyToManyField(Role, blank=True)

    objects = CustomUserManager()

    USERNAME_FIELD = 'email'
    REQUIRED_FIELDS = ['first_name', 'last_name']

    class Meta:
        default_permissions = ()
        permissions = [
            ("access_user_management", "Puede gestionar usuarios del back office"),
        ]

    def __str__(self):
        return self.email

    def get_full_name(self):
        return f"{self.first_name} {self.last_name}".strip()

    def nombres_roles(self):
        """
        Nombres de los roles del usuario.

        Un superusuario se considera con todos los roles de la academia.
        """
        if self.is_superuser:
            return set(NombreRol.values)
        return set(self.roles.values_list("name", flat=True))

    def alternar_tema(self):
        self.tema = self.Tema.OSCURO if self.tema == self.Tema.CLARO else self.Tema.CLARO
        self.save(update_fields=["tema"])
        return self.tema

    def get_all_permissions(self, obj=None):
        # permisos estándar (user_permissions + groups)
        perms = super().get_all_permissions(obj)

        # permisos heredados de roles
        role_perms = self.roles.filter(permissions__isnull=False).values_list(
            "permissions__content_type__app_label",
            "permissions__codename"
        )
        role_perms = {f"{ct}.{name}" for ct, name in role_perms}

        return perms.union(role_perms)

    def has_perm(self, perm, obj=None):
        "Does the user have a specific permission?"
        if self.is_active and self.is_superuser:
            return True

        # Primero, revisamos los permisos a nivel de usuario
        if super().has_perm(perm, obj):
            return True

        # 'perm' tiene el formato "app_label.codename"
        try:
            app_label, codename = perm.split('.')
        except ValueError:
            return False

        return self.is_active and self.roles.filter(
            permissions__content_type__app_label=app_label,
            permissions__codename=codename
        ).exists()

    def has_module_perms(self, app_label):
        "Does the user have permissions to view the app `app_label`?"
        if self.is_active and self.is_superuser:
            return True

        if super().has_module_perms(app_label):
            return True

        return self.roles.filter(permissions__content_type__app_label=app_label).exists()
