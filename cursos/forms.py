from django import forms
from django.core.exceptions import ValidationError

from alumnos.models import Alumno
from tablero.agregados import Ocupacion
from validaciones.documentos import es_nif_persona_valido, normalizar_documento

from .models import Clase, Curso, Inscripcion, Profesor


class CursoForm(forms.ModelForm):
    class Meta:
        model = Curso
        fields = [
            'nombre', 'nivel', 'descripcion', 'profesor', 'aula', 'modalidad',
            'capacidad_minima', 'capacidad_maxima', 'estado', 'fecha_inicio', 'fecha_fin',
        ]
        widgets = {
            'nombre': forms.TextInput(attrs={'class': 'form-control'}),
            'nivel': forms.TextInput(attrs={'class': 'form-control'}),
            'descripcion': forms.Textarea(attrs={'class': 'form-control', 'rows': 3}),
            'profesor': forms.Select(attrs={'class': 'form-select'}),
            'aula': forms.Select(attrs={'class': 'form-select'}),
            'modalidad': forms.Select(attrs={'class': 'form-select'}),
            'capacidad_minima': forms.NumberInput(attrs={'class': 'form-control', 'min': 0}),
            'capacidad_maxima': forms.NumberInput(attrs={'class': 'form-control', 'min': 1}),
            'estado': forms.Select(attrs={'class': 'form-select'}),
            'fecha_inicio': forms.DateInput(attrs={'class': 'form-control', 'type': 'date'}, format='%Y-%m-%d'),
            'fecha_fin': forms.DateInput(attrs={'class': 'form-control', 'type': 'date'}, format='%Y-%m-%d'),
        }

    def clean(self):
        cleaned_data = super().clean()
        minima = cleaned_data.get('capacidad_minima')
        maxima = cleaned_data.get('capacidad_maxima')
        if minima is not None and maxima is not None and minima > maxima:
            self.add_error('capacidad_maxima', 'La capacidad máxima no puede ser menor que la mínima.')

        inicio = cleaned_data.get('fecha_inicio')
        fin = cleaned_data.get('fecha_fin')
        if inicio and fin and fin < inicio:
            self.add_error('fecha_fin', 'La fecha de fin es anterior a la de inicio.')
        return cleaned_data


class ProfesorForm(forms.ModelForm):
    class Meta:
        model = Profesor
        fields = ['nombre', 'apellidos', 'nif', 'email', 'telefono', 'activo', 'usuario']
        widgets = {
            'nombre': forms.TextInput(attrs={'class': 'form-control'}),
            'apellidos': forms.TextInput(attrs={'class': 'form-control'}),
            'nif': forms.TextInput(attrs={'class': 'form-control', 'data-validar': 'nif'}),
            'email': forms.EmailInput(attrs={'class': 'form-control'}),
            'telefono': forms.TextInput(attrs={'class': 'form-control'}),
            'activo': forms.CheckboxInput(attrs={'class': 'form-check-input'}),
            'usuario': forms.Select(attrs={'class': 'form-select'}),
        }

    def clean_nif(self):
        nif = normalizar_documento(self.cleaned_data.get('nif'))
        if nif and not es_nif_persona_valido(nif):
            raise ValidationError('El DNI/NIE introducido no es válido.')
        return nif


class InscripcionForm(forms.ModelForm):
    """Inscripción de un alumno en un curso concreto."""

    class Meta:
        model = Inscripcion
        fields = ['alumno', 'fecha_inscripcion']
        widgets = {
            'alumno': forms.Select(attrs={'class': 'form-select'}),
            'fecha_inscripcion': forms.DateInput(attrs={'class': 'form-control', 'type': 'date'}, format='%Y-%m-%d'),
        }

    def __init__(self, *args, curso=None, **kwargs):
        super().__init__(*args, **kwargs)
        self.curso = curso
        self.instance.curso = curso
        self.fields['alumno'].queryset = Alumno.objects.filter(activo=True)

    def clean(self):
        cleaned_data = super().clean()
        alumno = cleaned_data.get('alumno')

        if self.curso.ocupacion == Ocupacion.COMPLETO:
            raise ValidationError('El curso está completo: no quedan plazas libres.')

        if alumno and self.curso.inscripciones.filter(alumno=alumno, activa=True).exists():
            self.add_error('alumno', 'El alumno ya está inscrito en este curso.')
        return cleaned_data

    def save(self, commit=True):
        inscripcion = super().save(commit=False)
        inscripcion.curso = self.curso
        if commit:
            inscripcion.save()
        return inscripcion


class ClaseForm(forms.ModelForm):
    class Meta:
        model = Clase
        fields = ['fecha', 'hora_inicio', 'hora_fin', 'profesor', 'es_sustitucion', 'aula', 'estado', 'comentario_interno']
        widgets = {
            'fecha': forms.DateInput(attrs={'class': 'form-control', 'type': 'date'}, format='%Y-%m-%d'),
            'hora_inicio': forms.TimeInput(attrs={'class': 'form-control', 'type': 'time'}, format='%H:%M'),
            'hora_fin': forms.TimeInput(attrs={'class': 'form-control', 'type': 'time'}, format='%H:%M'),
            'profesor': forms.Select(attrs={'class': 'form-select'}),
            'es_sustitucion': forms.CheckboxInput(attrs={'class': 'form-check-input'}),
            'aula': forms.Select(attrs={'class': 'form-select'}),
            'estado': forms.Select(attrs={'class': 'form-select'}),
            'comentario_interno': forms.Textarea(attrs={'class': 'form-control', 'rows': 2}),
        }

    def clean(self):
        cleaned_data = super().clean()
        inicio = cleaned_data.get('hora_inicio')
        fin = cleaned_data.get('hora_fin')
        if inicio and fin and fin <= inicio:
            self.add_error('hora_fin', 'La hora de fin debe ser posterior a la de inicio.')
        return cleaned_data
