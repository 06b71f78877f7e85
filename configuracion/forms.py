"""
Formularios de la aplicación **configuracion**.

.. module:: configuracion.forms
   :synopsis: Edición del perfil de la academia y de la conexión con el backend.
"""
from django import forms
from django.core.exceptions import ValidationError

from validaciones.documentos import es_identificador_fiscal_valido, normalizar_documento

from .models import PerfilAcademia


class PerfilAcademiaForm(forms.ModelForm):
    class Meta:
        model = PerfilAcademia
        fields = [
            'nombre_publico', 'web', 'email_contacto', 'telefono_contacto',
            'direccion', 'poblacion', 'codigo_postal', 'nif',
            'acreedor_sepa_id', 'acreedor_sepa_nombre',
            'tipo_pago_defecto', 'periodicidad_defecto', 'dia_cobro_defecto', 'plazas_defecto_cursos',
            'modulo_cumpleanos', 'notificar_cumpleanos_profesores',
        ]
        widgets = {
            'nombre_publico': forms.TextInput(attrs={'class': 'form-control'}),
            'web': forms.TextInput(attrs={'class': 'form-control'}),
            'email_contacto': forms.EmailInput(attrs={'class': 'form-control'}),
            'telefono_contacto': forms.TextInput(attrs={'class': 'form-control'}),
            'direccion': forms.TextInput(attrs={'class': 'form-control'}),
            'poblacion': forms.TextInput(attrs={'class': 'form-control'}),
            'codigo_postal': forms.TextInput(attrs={'class': 'form-control'}),
            'nif': forms.TextInput(attrs={'class': 'form-control', 'data-validar': 'nif_fiscal'}),
            'acreedor_sepa_id': forms.TextInput(attrs={'class': 'form-control'}),
            'acreedor_sepa_nombre': forms.TextInput(attrs={'class': 'form-control'}),
            'tipo_pago_defecto': forms.Select(attrs={'class': 'form-select'}),
            'periodicidad_defecto': forms.Select(attrs={'class': 'form-select'}),
            'plazas_defecto_cursos': forms.NumberInput(attrs={'class': 'form-control', 'min': 1}),
            'dia_cobro_defecto': forms.NumberInput(attrs={'class': 'form-control', 'min': 1, 'max': 28}),
            'modulo_cumpleanos': forms.CheckboxInput(attrs={'class': 'form-check-input'}),
            'notificar_cumpleanos_profesores': forms.CheckboxInput(attrs={'class': 'form-check-input'}),
        }

    def clean_nif(self):
        nif = normalizar_documento(self.cleaned_data.get('nif'))
        if nif and not es_identificador_fiscal_valido(nif):
            raise ValidationError('El NIF/CIF introducido no es válido.')
        return nif


class ConexionBaasForm(forms.ModelForm):
    class Meta:
        model = PerfilAcademia
        fields = ['baas_url', 'baas_clave']
        widgets = {
            'baas_url': forms.URLInput(attrs={'class': 'form-control', 'placeholder': 'https://xxxx.supabase.co'}),
            'baas_clave': forms.PasswordInput(attrs={'class': 'form-control'}, render_value=True),
        }
