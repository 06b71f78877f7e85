from django import forms
from django.forms import modelformset_factory

from .models import RegistroAsistencia


class RegistroAsistenciaForm(forms.ModelForm):
    class Meta:
        model = RegistroAsistencia
        fields = ['asistio', 'retraso', 'falta_justificada', 'deberes_hechos', 'comentarios']
        widgets = {
            'asistio': forms.CheckboxInput(attrs={'class': 'form-check-input'}),
            'retraso': forms.Select(attrs={'class': 'form-select form-select-sm'}),
            'falta_justificada': forms.CheckboxInput(attrs={'class': 'form-check-input'}),
            'deberes_hechos': forms.CheckboxInput(attrs={'class': 'form-check-input'}),
            'comentarios': forms.TextInput(attrs={'class': 'form-control form-control-sm'}),
        }

    def clean(self):
        cleaned_data = super().clean()
        # Una falta justificada implica no haber asistido.
        if cleaned_data.get('asistio') and cleaned_data.get('falta_justificada'):
            cleaned_data['falta_justificada'] = False
        return cleaned_data


RegistroAsistenciaFormSet = modelformset_factory(
    RegistroAsistencia,
    form=RegistroAsistenciaForm,
    extra=0,
)
