from django import forms
from django.core.exceptions import ValidationError

from alumnos.models import TipoPago
from validaciones.documentos import es_identificador_fiscal_valido, normalizar_documento

from .models import Factura, Recibo


class ReciboForm(forms.ModelForm):
    class Meta:
        model = Recibo
        fields = ['alumno', 'curso', 'fecha', 'concepto', 'importe', 'estado', 'tipo_pago', 'fecha_pago', 'comentario_interno']
        widgets = {
            'alumno': forms.Select(attrs={'class': 'form-select'}),
            'curso': forms.Select(attrs={'class': 'form-select'}),
            'fecha': forms.DateInput(attrs={'class': 'form-control', 'type': 'date'}, format='%Y-%m-%d'),
            'concepto': forms.TextInput(attrs={'class': 'form-control'}),
            'importe': forms.NumberInput(attrs={'class': 'form-control', 'step': '0.01', 'min': '0'}),
            'estado': forms.Select(attrs={'class': 'form-select'}),
            'tipo_pago': forms.Select(attrs={'class': 'form-select'}),
            'fecha_pago': forms.DateInput(attrs={'class': 'form-control', 'type': 'date'}, format='%Y-%m-%d'),
            'comentario_interno': forms.Textarea(attrs={'class': 'form-control', 'rows': 2}),
        }

    def clean(self):
        cleaned_data = super().clean()
        if cleaned_data.get('estado') == Recibo.Estado.COBRADO and not cleaned_data.get('fecha_pago'):
            cleaned_data['fecha_pago'] = cleaned_data.get('fecha')
        return cleaned_data


class FacturaForm(forms.ModelForm):
    class Meta:
        model = Factura
        fields = ['tipo', 'numero', 'fecha', 'tercero', 'nif_tercero', 'categoria',
                  'base_imponible', 'importe_iva', 'importe_irpf', 'estado']
        widgets = {
            'tipo': forms.Select(attrs={'class': 'form-select'}),
            'numero': forms.TextInput(attrs={'class': 'form-control'}),
            'fecha': forms.DateInput(attrs={'class': 'form-control', 'type': 'date'}, format='%Y-%m-%d'),
            'tercero': forms.TextInput(attrs={'class': 'form-control'}),
            'nif_tercero': forms.TextInput(attrs={'class': 'form-control', 'data-validar': 'nif_fiscal'}),
            'categoria': forms.TextInput(attrs={'class': 'form-control'}),
            'base_imponible': forms.NumberInput(attrs={'class': 'form-control', 'step': '0.01'}),
            'importe_iva': forms.NumberInput(attrs={'class': 'form-control', 'step': '0.01'}),
            'importe_irpf': forms.NumberInput(attrs={'class': 'form-control', 'step': '0.01'}),
            'estado': forms.Select(attrs={'class': 'form-select'}),
        }
        labels = {
            'nif_tercero': 'NIF/CIF',
        }

    def clean_nif_tercero(self):
        nif = normalizar_documento(self.cleaned_data.get('nif_tercero'))
        if nif and not es_identificador_fiscal_valido(nif):
            raise ValidationError('El NIF/CIF introducido no es válido.')
        return nif


class ReciboFiltroForm(forms.Form):
    q = forms.CharField(
        required=False,
        label='Alumno',
        widget=forms.TextInput(attrs={'class': 'form-control', 'placeholder': 'Nombre, apellidos o código...'})
    )
    estado = forms.ChoiceField(
        required=False,
        choices=[('', 'Todos los estados')] + list(Recibo.Estado.choices),
        widget=forms.Select(attrs={'class': 'form-select'})
    )
    tipo_pago = forms.ChoiceField(
        required=False,
        choices=[('', 'Todos los tipos de pago')] + list(TipoPago.choices),
        widget=forms.Select(attrs={'class': 'form-select'})
    )
    fecha_desde = forms.DateField(
        required=False, widget=forms.DateInput(attrs={'class': 'form-control', 'type': 'date'})
    )
    fecha_hasta = forms.DateField(
        required=False, widget=forms.DateInput(attrs={'class': 'form-control', 'type': 'date'})
    )
