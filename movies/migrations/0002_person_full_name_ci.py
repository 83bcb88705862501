from django.db import migrations, models
import django.db.models.functions.text


class Migration(migrations.Migration):

    dependencies = [
        ('movies', '0001_initial'),
    ]

    operations = [
        migrations.AlterField(
            model_name='actor',
            name='full_name',
            field=models.CharField(max_length=150),
        ),
        migrations.AlterField(
            model_name='director',
            name='full_name',
            field=models.CharField(max_length=150),
        ),
        migrations.AddConstraint(
            model_name='actor',
            constraint=models.UniqueConstraint(django.db.models.functions.text.Lower('full_name'), name='unique_actor_full_name_ci'),
        ),
        migrations.AddConstraint(
            model_name='director',
            constraint=models.UniqueConstraint(django.db.models.functions.text.Lower('full_name'), name='unique_director_full_name_ci'),
        ),
    ]
