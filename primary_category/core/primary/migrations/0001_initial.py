import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('pc_content', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='PrimaryCategory',
            fields=[
                ('id', models.BigAutoField(primary_key=True, serialize=False)),
                ('_slug', models.SlugField(allow_unicode=True, help_text='Slug of the category at the time it was assigned. Used to display stale assignments.', max_length=200)),
                ('created', models.DateTimeField(auto_now_add=True, db_index=True)),
                ('modified', models.DateTimeField(auto_now=True)),
                ('category', models.ForeignKey(default=None, help_text='The primary category. NULL if that category has since been deleted.', null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='primary_category_assignments', to='pc_content.category')),
                ('content_item', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='primary_category_assignments', to='pc_content.contentitem')),
            ],
            options={
                'verbose_name': 'Primary category',
                'verbose_name_plural': 'Primary categories',
                'permissions': [('manage_primary_categories', 'Can manage primary categories')],
            },
        ),
        migrations.AddConstraint(
            model_name='primarycategory',
            constraint=models.UniqueConstraint(fields=('content_item',), name='pc_primary_uniq_content_item'),
        ),
    ]
