from django import forms
from django.core.exceptions import ValidationError
from django.forms import inlineformset_factory

from validaciones.documentos import es_nif_persona_valido, normalizar_documento
from validaciones.iban import es_iban_valido, normalizar_iban, resolver_bic

from .models import Alumno, TipoPago, Tutor


class AlumnoForm(forms.ModelForm):
    class Meta:
        model = Alumno
        fields = [
            'nombre', 'apellidos', 'dni', 'fecha_nacimiento', 'es_menor',
            'email', 'telefono', 'direccion', 'codigo_postal', 'poblacion',
            'tipo_pago', 'periodicidad',
            'titular_cuenta', 'iban', 'bic', 'dia_cobro', 'tipo_sepa', 'fecha_aceptacion_sepa',
            'observaciones', 'activo',
        ]
        widgets = {
            'nombre': forms.TextInput(attrs={'class': 'form-control'}),
            'apellidos': forms.TextInput(attrs={'class': 'form-control'}),
            # data-validar: comprobación al perder el foco (static/js/validacion.js)
            'dni': forms.TextInput(attrs={'class': 'form-control', 'data-validar': 'nif'}),
            'fecha_nacimiento': forms.DateInput(attrs={'class': 'form-control', 'type': 'date'}, format='%Y-%m-%d'),
            'es_menor': forms.CheckboxInput(attrs={'class': 'form-check-input'}),
            'email': forms.EmailInput(attrs={'class': 'form-control'}),
            'telefono': forms.TextInput(attrs={'class': 'form-control'}),
            'direccion': forms.TextInput(attrs={'class': 'form-control'}),
            'codigo_postal': forms.TextInput(attrs={'class': 'form-control'}),
            'poblacion': forms.TextInput(attrs={'class': 'form-control'}),
            'tipo_pago': forms.Select(attrs={'class': 'form-select'}),
            'periodicidad': forms.Select(attrs={'class': 'form-select'}),
            'titular_cuenta': forms.TextInput(attrs={'class': 'form-control'}),
            'iban': forms.TextInput(attrs={'class': 'form-control', 'data-validar': 'iban', 'data-bic': 'id_bic'}),
            'bic': forms.TextInput(attrs={'class': 'form-control'}),
            'dia_cobro': forms.NumberInput(attrs={'class': 'form-control', 'min': 1, 'max': 28}),
            'tipo_sepa': forms.Select(attrs={'class': 'form-select'}),
            'fecha_aceptacion_sepa': forms.DateInput(attrs={'class': 'form-control', 'type': 'date'}, format='%Y-%m-%d'),
            'observaciones': forms.Textarea(attrs={'class': 'form-control', 'rows': 3}),
            'activo': forms.CheckboxInput(attrs={'class': 'form-check-input'}),
        }
        labels = {
            'activo': 'Alumno activo',
        }

    def clean_dni(self):
        dni = normalizar_documento(self.cleaned_data.get('dni'))
        if dni and not es_nif_persona_valido(dni):
            raise ValidationError('El DNI/NIE introducido no es válido.')
        return dni

    def clean_iban(self):
        iban = normalizar_iban(self.cleaned_data.get('iban'))
        if iban and not es_iban_valido(iban):
            raise ValidationError('El IBAN introducido no es válido.')
        return iban

    def clean(self):
        cleaned_data = super().clean()
        iban = cleaned_data.get('iban')

        # BIC deducido de la entidad cuando el usuario no lo ha indicado
        if iban and not cleaned_data.get('bic'):
            cleaned_data['bic'] = resolver_bic(iban)

        if cleaned_data.get('tipo_pago') == TipoPago.DOMICILIADO:
            if not iban and 'iban' not in self.errors:
                self.add_error('iban', 'Los pagos domiciliados necesitan un IBAN.')
            if not cleaned_data.get('titular_cuenta'):
                self.add_error('titular_cuenta', 'Indica el titular de la cuenta.')
        return cleaned_data


class TutorForm(forms.ModelForm):
    class Meta:
        model = Tutor
        fields = ['nif', 'nombre_completo', 'telefono', 'email']
        widgets = {
            'nif': forms.TextInput(attrs={'class': 'form-control', 'data-validar': 'nif'}),
            'nombre_completo': forms.TextInput(attrs={'class': 'form-control'}),
            'telefono': forms.TextInput(attrs={'class': 'form-control'}),
            'email': forms.EmailInput(attrs={'class': 'form-control'}),
        }

    def clean_nif(self):
        nif = normalizar_documento(self.cleaned_data.get('nif'))
        if not es_nif_persona_valido(nif):
            raise ValidationError('El DNI/NIE del tutor no es válido.')
        return nif


TutorFormSet = inlineformset_factory(
    Alumno,
    Tutor,
    form=TutorForm,
    extra=2,
    max_num=2,
    validate_max=True,
    can_delete=True,
)


class AlumnoSearchForm(forms.Form):
    q = forms.CharField(
        required=False,
        label='Buscar',
        widget=forms.TextInput(attrs={
            'placeholder': 'Buscar por nombre, apellidos, DNI o email...',
            'class': 'form-control'
        })
    )

    tipo_pago = forms.ChoiceField(
        required=False,
        choices=[('', 'Todos los tipos de pago')] + list(TipoPago.choices),
        widget=forms.Select(attrs={'class': 'form-select'})
    )

    activo = forms.ChoiceField(
        required=False,
        choices=[('', 'Todos'), ('true', 'Activos'), ('false', 'Inactivos')],
        widget=forms.Select(attrs={'class': 'form-select'})
    )
