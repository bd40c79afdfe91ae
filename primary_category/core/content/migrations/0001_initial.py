import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Category',
            fields=[
                ('id', models.BigAutoField(primary_key=True, serialize=False)),
                ('slug', models.SlugField(allow_unicode=True, help_text='Stable, URL-friendly key. Avoid changing it once it has been published.', max_length=200, unique=True)),
                ('name', models.CharField(max_length=200)),
                ('parent', models.ForeignKey(blank=True, default=None, help_text='Category one level up from this one, forming a hierarchy.', null=True, on_delete=django.db.models.deletion.CASCADE, related_name='children', to='pc_content.category')),
            ],
            options={
                'verbose_name_plural': 'Categories',
                'ordering': ['name', 'id'],
            },
        ),
        migrations.CreateModel(
            name='ContentItem',
            fields=[
                ('id', models.BigAutoField(primary_key=True, serialize=False)),
                ('title', models.CharField(max_length=500)),
                ('slug', models.SlugField(allow_unicode=True, help_text='Stable, URL-friendly key. Avoid changing it once it has been published.', max_length=200)),
                ('content_type', models.CharField(db_index=True, default='post', help_text="Kind of content, e.g. 'post' or 'page'.", max_length=50)),
                ('created', models.DateTimeField(auto_now_add=True, db_index=True)),
                ('modified', models.DateTimeField(auto_now=True)),
                ('author', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'ordering': ['-created', '-id'],
            },
        ),
        migrations.CreateModel(
            name='CategoryMembership',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created', models.DateTimeField(auto_now_add=True, db_index=True)),
                ('category', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, to='pc_content.category')),
                ('content_item', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, to='pc_content.contentitem')),
            ],
        ),
        migrations.AddField(
            model_name='contentitem',
            name='categories',
            field=models.ManyToManyField(related_name='content_items', through='pc_content.CategoryMembership', to='pc_content.category'),
        ),
        migrations.AddConstraint(
            model_name='contentitem',
            constraint=models.UniqueConstraint(fields=('content_type', 'slug'), name='pc_content_uniq_type_slug'),
        ),
        migrations.AddConstraint(
            model_name='categorymembership',
            constraint=models.UniqueConstraint(fields=('content_item', 'category'), name='pc_content_uniq_item_category'),
        ),
    ]
